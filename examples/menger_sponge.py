#!/usr/bin/env python3
""" Renders a level 3 sponge, by default as an animated gif. """

import mengersponge

level = 3

scene = mengersponge.Scene.generate(level, 300)

if __name__ == "__main__":
    mengersponge.commandline_render(scene, default_renderer="gif")
