import pytest
from pytest import approx

import mengersponge
from mengersponge.util import Color, Vector

import data


@pytest.mark.parametrize("scene", data.params_scenes)
def test_positions_within_depth_range(scene):
    for position in scene.positions:
        assert scene.min_z <= position.z <= scene.max_z


@pytest.mark.parametrize("scene", data.params_scenes)
def test_depth_range_is_tight(scene):
    zs = [position.z for position in scene.positions]
    assert scene.min_z == min(zs)
    assert scene.max_z == max(zs)


def test_level2_depth_range():
    scene = data.scenes[2]
    assert scene.min_z < scene.max_z
    assert scene.min_z == approx(-400 / 3)
    assert scene.max_z == approx(400 / 3)
    assert scene.cube_size == approx(100 / 3)
    assert scene.cube_count == 400


def test_from_sponge():
    scene = mengersponge.Scene.from_sponge(mengersponge.generate(1, 30))
    assert scene.cube_size == 10
    assert scene.min_z == -10
    assert scene.max_z == 10
    assert isinstance(scene.positions, tuple)


@pytest.mark.parametrize("scene", data.params_scenes[1:])
def test_color_gradient_ends(scene):
    nearest = min(scene.positions, key=lambda p: p.z)
    farthest = max(scene.positions, key=lambda p: p.z)

    assert scene.cube_color(nearest) == Color(255, 0, 0)
    assert scene.cube_color(farthest) == Color(0, 0, 255)


def test_color_gradient_middle():
    scene = data.scenes[1]
    assert scene.depth_factor(0) == approx(0.5)
    assert scene.cube_color(Vector(0, 0, 0)) == approx(Color(127.5, 0, 127.5))


def test_depth_factor_without_depth_range():
    scene = data.scenes[0]
    assert scene.min_z == scene.max_z == 0
    assert scene.depth_factor(0) == 0.5
    assert scene.cube_color(scene.positions[0]) == approx(Color(127.5, 0, 127.5))


@pytest.mark.parametrize("z, expected", [(-1000, 0), (-100, 0), (100, 1), (1000, 1)])
def test_depth_factor_clamped(z, expected):
    assert data.scenes[1].depth_factor(z) == expected


def test_custom_gradient():
    scene = data.scenes[1]
    assert scene.cube_color(Vector(0, 0, 100), start=0, end=200) == Color(200, 200, 200)
