import csv

import flags
import pytest

import mengersponge
from mengersponge import rendering

import data


def test_renderer_from_extension(tmp_path):
    filename = str(tmp_path / "frame.png")
    assert mengersponge.commandline_render(data.scenes[0], argv=["-o", filename]) == ("image", filename)
    assert (tmp_path / "frame.png").exists()


def test_calls_renderer(tmp_path):
    filename = str(tmp_path / "calls.csv")
    mengersponge.commandline_render(data.scenes[1], argv=["--output", filename])

    with open(filename, newline="") as fp:
        rows = list(csv.reader(fp))

    assert rows[0] == ["index", "call", "args"]
    assert len(rows) == 1 + 4 + 7 * 20
    assert rows[1][1] == "background"
    assert rows[-1][1] == "pop"


def test_explicit_renderer_overrides_extension(tmp_path):
    filename = str(tmp_path / "animation.png")
    renderer, _ = mengersponge.commandline_render(data.scenes[0],
                                                  argv=["-r", "gif", "-o", filename],
                                                  frame_count=2, size=(40, 30))
    assert renderer == "gif"
    assert (tmp_path / "animation.png").exists()


def test_default_output_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert mengersponge.commandline_render(data.scenes[0], default_renderer="calls", argv=[]) == \
        ("calls", "output.csv")
    assert (tmp_path / "output.csv").exists()


def test_default_renderer_is_window(monkeypatch):
    rendered = []
    monkeypatch.setitem(rendering._renderers, "window",
                        (lambda scene, filename: rendered.append((scene, filename)),
                         None,
                         rendering.DisplayMode.live))

    assert mengersponge.commandline_render(data.scenes[0], argv=[]) == ("window", None)
    assert rendered == [(data.scenes[0], None)]


def test_unknown_extension(tmp_path):
    with pytest.raises(ValueError):
        mengersponge.commandline_render(data.scenes[0], argv=["-o", str(tmp_path / "x.unknown")])


def test_live_renderer_with_output(tmp_path):
    with pytest.raises(ValueError):
        mengersponge.commandline_render(data.scenes[0],
                                        argv=["-r", "window", "-o", str(tmp_path / "x.png")])


def test_unknown_renderer():
    with pytest.raises(SystemExit):
        mengersponge.commandline_render(data.scenes[0], argv=["-r", "povray"])


def test_registered_renderers():
    assert rendering._renderers["image"][2] == rendering.DisplayMode.still
    assert rendering._renderers["gif"][2] == rendering.DisplayMode.animation
    assert rendering._extensions[".gif"] == "gif"
    assert rendering._extensions[".png"] == "image"
    assert rendering._extensions[".csv"] == "calls"


def test_display_modes_are_flags():
    assert issubclass(rendering.DisplayMode, flags.Flags)
    assert rendering._renderers["window"][2] == rendering.DisplayMode.live
    assert rendering.DisplayMode.live != rendering.DisplayMode.still
