""" Software rasterizer implementing the canvas with numpy and PIL.

Camera matches the default p5.js WEBGL camera: origin in the middle of the
canvas, x to the right, y down, z towards the viewer, eye on the z axis
far enough to see the whole canvas at z = 0. Cubes are split into faces,
back faces are culled and the rest is painted from the farthest face to the
nearest one, with flat shading per face. """

import itertools
import math

import numpy
import PIL.Image
import PIL.ImageDraw

from .. import util
from . import canvas
from . import render_params

_CORNERS = numpy.array(list(itertools.product((-0.5, 0.5), repeat=3)))
# Corner index is 4 * x + 2 * y + z, where x, y, z are 0 or 1
_FACE_NORMALS = numpy.array([(-1, 0, 0), (1, 0, 0),
                             (0, -1, 0), (0, 1, 0),
                             (0, 0, -1), (0, 0, 1)], dtype=numpy.float64)
_FACE_INDICES = numpy.array([[0, 1, 3, 2], [4, 6, 7, 5],
                             [0, 4, 5, 1], [2, 3, 7, 6],
                             [0, 2, 6, 4], [1, 5, 7, 3]])

_NEAR_PLANE = 1


def _normalized_rows(a):
    lengths = numpy.linalg.norm(a, axis=1, keepdims=True)
    lengths[lengths == 0] = 1
    return a / lengths


class SoftwareCanvas(canvas.Canvas):
    def __init__(self,
                 width=render_params.canvas_size[0],
                 height=render_params.canvas_size[1],
                 field_of_view=render_params.field_of_view):
        self.focal_length = (height / 2) / math.tan(math.radians(field_of_view) / 2)
        self.eye = numpy.array((0, 0, self.focal_length), dtype=numpy.float64)
        super().__init__(width, height)

    def begin_frame(self):
        super().begin_frame()
        self.background_color = util.BLACK
        self._clear_faces()

    @property
    def face_count(self):
        return sum(len(quads) for quads in self._quads)

    def _clear_faces(self):
        self._quads = []
        self._normals = []
        self._ambient = []
        self._specular = []
        self._shininess = []

    def _clear(self, color):
        self.background_color = color
        self._clear_faces()

    def _draw_box(self, transformation, size, material):
        matrix = transformation.as_matrix()
        rotation = matrix[:3, :3]

        corners = _CORNERS * size @ rotation.T + matrix[:3, 3]
        normals = _FACE_NORMALS @ rotation.T
        quads = corners[_FACE_INDICES]

        centers = quads.mean(axis=1)
        visible = numpy.einsum("ij,ij->i", normals, self.eye - centers) > 0

        count = numpy.count_nonzero(visible)
        self._quads.append(quads[visible])
        self._normals.append(normals[visible])
        self._ambient.append(numpy.tile(material.ambient, (count, 1)))
        self._specular.append(numpy.tile(material.specular, (count, 1)))
        self._shininess.append(numpy.full(count, material.shininess, dtype=numpy.float64))

    def _shade(self, quads, normals, ambient, specular, shininess):
        """ Flat shading of faces, returns an (n, 3) array of colors in 0-255 """
        centers = quads.mean(axis=1)
        to_eye = _normalized_rows(self.eye - centers)

        ambient_light = numpy.array(self.ambient, dtype=numpy.float64) / 255
        colors = ambient * ambient_light

        for light in self.point_lights:
            light_color = numpy.array(light.color, dtype=numpy.float64) / 255
            to_light = _normalized_rows(light.position.as_array() - centers)

            lambert = numpy.einsum("ij,ij->i", normals, to_light)
            lit = lambert > 0
            lambert = numpy.clip(lambert, 0, None)

            half = _normalized_rows(to_light + to_eye)
            highlight = numpy.clip(numpy.einsum("ij,ij->i", normals, half), 0, None)
            highlight = numpy.where(lit, highlight ** shininess, 0)

            colors = colors + ambient * light_color * lambert[:, numpy.newaxis]
            colors = colors + specular * light_color * highlight[:, numpy.newaxis]

        return numpy.clip(colors, 0, 255)

    def _project(self, points):
        """ Project (..., 3) array of points to screen coordinates, also return distance
        from the eye along the view axis """
        depth = self.focal_length - points[..., 2]
        safe_depth = numpy.where(depth > _NEAR_PLANE, depth, _NEAR_PLANE)
        x = self.width / 2 + self.focal_length * points[..., 0] / safe_depth
        y = self.height / 2 + self.focal_length * points[..., 1] / safe_depth
        return numpy.stack([x, y], axis=-1), depth

    def image(self):
        """ Rasterize all faces drawn so far and return them as a PIL image """
        image = PIL.Image.new("RGB", (self.width, self.height), self.background_color.quantized())
        if not self._quads:
            return image

        quads = numpy.concatenate(self._quads)
        if not len(quads):
            return image

        colors = self._shade(quads,
                             numpy.concatenate(self._normals),
                             numpy.concatenate(self._ambient),
                             numpy.concatenate(self._specular),
                             numpy.concatenate(self._shininess))
        colors = numpy.rint(colors).astype(numpy.uint8)

        screen, depth = self._project(quads)
        in_front = numpy.all(depth > _NEAR_PLANE, axis=1)
        order = numpy.argsort(-depth.mean(axis=1), kind="stable")

        draw = PIL.ImageDraw.Draw(image)
        for i in order:
            if not in_front[i]:
                continue
            draw.polygon([tuple(p) for p in screen[i]], fill=tuple(int(c) for c in colors[i]))

        return image

    def pixels(self):
        """ Rendered frame as (height, width, 3) uint8 numpy array """
        return numpy.asarray(self.image())
