""" Menger sponge generation and the immutable scene that gets rendered. """

import collections
import itertools
import math
import numbers

from . import util
from .rendering import render_params


def edge_count(offset):
    """ Number of coordinates of a sub-cell offset that lie on the edge (-1 or 1) """
    return sum(1 for v in offset if v in (-1, 1))


# Offsets of the 20 sub-cells of a 3x3x3 subdivision that are kept.
# Center (edge count 0) and the six face centers (edge count 1) are removed.
SUBCELL_OFFSETS = tuple(util.Vector(*offset)
                        for offset in itertools.product((-1, 0, 1), repeat=3)
                        if edge_count(offset) >= 2)


class Sponge(collections.namedtuple("Sponge", "positions size")):
    """ Centers of all cubes of a sponge and their common edge length """
    __slots__ = ()


def check_parameters(level, initial_size):
    """ Raise an exception if the sponge can't be generated with these parameters. """
    if isinstance(level, bool) or not isinstance(level, numbers.Integral):
        raise ValueError("Level must be an integer, got {!r}".format(level))
    if level < 0:
        raise ValueError("Level must be positive or zero, got {}".format(level))

    if not isinstance(initial_size, numbers.Real) or isinstance(initial_size, bool):
        raise TypeError("Initial size must be a real number, got {!r}".format(initial_size))
    if not math.isfinite(initial_size) or initial_size <= 0:
        raise ValueError("Initial size must be positive and finite, got {}".format(initial_size))


def generate(level, initial_size):
    """ Generate cube positions of a Menger sponge.

    Starts with a single cube of edge `initial_size` centered in the origin and
    `level` times replaces every cube with the 20 edge and corner cubes of its
    3x3x3 subdivision. Returns a Sponge with the positions of all 20**level
    cubes and their edge length (initial_size / 3**level). """
    check_parameters(level, initial_size)

    positions = [util.Vector(0, 0, 0)]
    size = initial_size

    for _ in range(level):
        step = size / 3
        positions = [pos + offset * step
                     for pos in positions
                     for offset in SUBCELL_OFFSETS]
        size = step

    return Sponge(tuple(positions), size)


class Scene(collections.namedtuple("Scene", "positions cube_size min_z max_z")):
    """ Everything the frame renderer needs to know about the sponge.
    Created once, read every frame. """
    __slots__ = ()

    @classmethod
    def from_sponge(cls, sponge):
        box = util.BoundingBox.containing(sponge.positions)
        return cls(tuple(sponge.positions), sponge.size, box.a.z, box.b.z)

    @classmethod
    def generate(cls, level=render_params.level, initial_size=render_params.initial_size):
        with util.status_block("generating level {} sponge".format(level)):
            return cls.from_sponge(generate(level, initial_size))

    @property
    def cube_count(self):
        return len(self.positions)

    def depth_factor(self, z):
        """ Map z from [min_z, max_z] to [0, 1].
        Scenes without any depth range (level 0) give 0.5 """
        t = util.safe_div(z - self.min_z, self.max_z - self.min_z, zero_over_zero=0.5)
        return util.clamp(t, 0, 1)

    def cube_color(self, position,
                   start=render_params.gradient_start, end=render_params.gradient_end):
        return util.lerp_color(start, end, self.depth_factor(position.z))
