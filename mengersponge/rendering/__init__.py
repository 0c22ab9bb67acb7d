import sys
import os
import argparse
import importlib

import flags
import PIL.Image


class DisplayMode(flags.Flags):
    """ What kind of output a renderer produces """
    still = ()  # A single frame saved to a file
    animation = ()  # Fixed number of frames saved to a file
    live = ()  # Frames are drawn into a window until it is closed, no output file


def commandline_render(scene, default_renderer=None, argv=None, **kwargs):
    """ Reads commandline arguments, chooses a renderer and passes the scene to it. """

    parser = argparse.ArgumentParser(description='Render a Menger sponge')
    parser.add_argument('--output', '-o',
                        help='File name of the output. '
                             'Renderer is chosen by its extension unless --renderer is given.')
    parser.add_argument('--renderer', '-r', choices=sorted(_renderers),
                        help='Renderer to use.')

    args = parser.parse_args(argv)

    if args.renderer is not None:
        renderer = args.renderer
    else:
        renderer = default_renderer

    if args.output is not None:
        output = args.output
        if renderer is None:
            extension = os.path.splitext(output)[1].lower()
            try:
                renderer = _extensions[extension]
            except KeyError:
                raise ValueError("No renderer for file extension {!r}".format(extension))
        if _renderers[renderer][2] == DisplayMode.live:
            raise ValueError("Renderer {} does not write output files".format(renderer))
    else:
        if renderer is None:
            renderer = "window"
        ext = _renderers[renderer][1]
        if ext is not None:
            output = "output" + ext
        else:
            output = None

    _render_one(renderer, scene, output, **kwargs)
    return renderer, output


def _render_one(renderer, scene, output, **kwargs):
    if output is not None:
        print("Rendering with renderer {} to file {}".format(renderer, output))
    else:
        print("Rendering with renderer {}".format(renderer))

    _renderers[renderer][0](scene, filename=output, **kwargs)


def _register(name, module_name, extensions, display_mode, default_extension=None):
    try:
        module = importlib.import_module("." + module_name, __name__)
    except ImportError as e:
        print("Renderer {} is unavailable due to import error: {}".format(name, str(e)))
        return

    if default_extension is None and len(extensions):
        default_extension = extensions[0]

    for extension in extensions:
        _extensions[extension] = name

    setattr(sys.modules[__name__], module_name, module)
    _renderers[name] = (getattr(module, "render_" + name), default_extension, display_mode)


_renderers = {}
_extensions = {}

PIL.Image.init()

_register("image", "image", list(PIL.Image.EXTENSION.keys()), DisplayMode.still, ".png")
_register("gif", "image", [".gif"], DisplayMode.animation)
_register("calls", "calls", [".csv"], DisplayMode.still)
_register("window", "matplotlib_window", [], DisplayMode.live)
