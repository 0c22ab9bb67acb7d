import itertools

import numpy
import matplotlib.animation
import matplotlib.pyplot as plt

from . import frame
from . import render_params
from . import software


class SpongeView:
    """ Figure axes showing frames of the sponge rendered by the software canvas """

    def __init__(self, scene, figure, size=render_params.canvas_size):
        self.scene = scene
        self.canvas = software.SoftwareCanvas(*size)

        axes = figure.add_axes([0, 0, 1, 1])
        axes.set_axis_off()
        self.picture = axes.imshow(numpy.zeros((size[1], size[0], 3), dtype=numpy.uint8))

    def update(self, frame_index):
        self.canvas.begin_frame()
        frame.draw_frame(self.scene, frame_index, self.canvas)
        self.picture.set_data(self.canvas.pixels())
        return (self.picture,)


def make_animation(scene, figure, interval=render_params.window_interval):
    """ Animation drawing frames 0, 1, 2, ... until the figure is closed """
    view = SpongeView(scene, figure)
    return matplotlib.animation.FuncAnimation(figure,
                                              view.update,
                                              frames=itertools.count(),
                                              interval=interval,
                                              blit=True,
                                              cache_frame_data=False)


def render_window(scene,
                  filename=None  # For interface compatibility with other renderers
                  ):
    width, height = render_params.canvas_size
    figure = plt.figure(figsize=(width / 100, height / 100), dpi=100)
    animation = make_animation(scene, figure)  # Must stay referenced while the window is open
    plt.show()
    return animation
