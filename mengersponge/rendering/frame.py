""" Drawing of a single frame of the rotating sponge. """

import math

from .. import util
from . import render_params


def light_position(frame_index, params=render_params):
    """ Position of the orbiting point light in the given frame """
    angle = frame_index * params.light_orbit_speed
    return util.Vector(params.light_orbit_radius * math.cos(angle),
                       0,
                       params.light_orbit_radius * math.sin(angle))


def rotation_angle(frame_index, params=render_params):
    return frame_index * params.rotation_speed


def draw_frame(scene, frame_index, canvas, params=render_params):
    """ Issue all drawing calls of one frame to the canvas.

    The calls depend only on the scene and frame index, the host owns the frame
    loop and decides which frame indices get drawn. """
    canvas.background(params.background)
    canvas.ambient_light(params.ambient)
    canvas.point_light(params.light_color, light_position(frame_index, params))

    canvas.rotate_y(rotation_angle(frame_index, params))

    for position in scene.positions:
        with canvas.pushed():
            canvas.translate(*position)
            canvas.ambient_material(scene.cube_color(position,
                                                     params.gradient_start,
                                                     params.gradient_end))
            canvas.specular_material(params.specular)
            canvas.shininess(params.shininess)
            canvas.box(scene.cube_size)
