""" Renders the rotating sponge with the configured parameters.

    python -m mengersponge [--renderer NAME] [--output FILE]
"""

import sys

from . import sponge
from . import rendering
from .rendering import render_params


def main(argv=None, level=render_params.level, initial_size=render_params.initial_size):
    try:
        sponge.check_parameters(level, initial_size)
    except (TypeError, ValueError) as e:
        raise SystemExit("Invalid sponge parameters: {}".format(e))

    scene = sponge.Scene.generate(level, initial_size)
    print("{} cubes with edge {:.4g}".format(scene.cube_count, scene.cube_size))

    return rendering.commandline_render(scene, argv=argv)


if __name__ == "__main__":
    main(sys.argv[1:])
