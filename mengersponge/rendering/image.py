from .. import util
from . import frame
from . import render_params
from . import software


def render_pil_frames(scene, frame_indices, size=render_params.canvas_size):
    """ Yield PIL images of the given frames, all drawn on a single canvas """
    canvas = software.SoftwareCanvas(*size)
    for frame_index in frame_indices:
        canvas.begin_frame()
        frame.draw_frame(scene, frame_index, canvas)
        yield canvas.image()


def render_pil_image(scene, frame_index=0, size=render_params.canvas_size):
    return next(render_pil_frames(scene, [frame_index], size))


def render_image(scene, filename, frame_index=0, size=render_params.canvas_size):
    with util.status_block("rendering frame {}".format(frame_index)):
        image = render_pil_image(scene, frame_index, size)
    image.save(filename)


def render_gif(scene, filename,
               frame_count=render_params.gif_frame_count,
               duration=render_params.gif_frame_duration,
               size=render_params.canvas_size):
    if frame_count < 1:
        raise ValueError("Animation needs at least one frame")

    with util.status_block("rendering {} frames".format(frame_count)):
        images = list(render_pil_frames(scene, range(frame_count), size))

    with util.status_block("saving"):
        images[0].save(filename,
                       format="GIF",
                       save_all=True,
                       append_images=images[1:],
                       duration=duration,
                       loop=0)
