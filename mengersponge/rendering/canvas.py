import collections
import contextlib

from .. import util


class Material(collections.namedtuple("Material", "ambient specular shininess")):
    __slots__ = ()


class PointLight(collections.namedtuple("PointLight", "color position")):
    """ Point light, position is in world coordinates """
    __slots__ = ()


class Canvas:
    """ Immediate mode 3D drawing context.

    Keeps the current transformation (with a push / pop stack), lights and
    material, the way a p5.js WEBGL canvas does. Drawing calls are passed to
    `_draw_box` and `_clear` hooks together with the state they need, subclasses
    override these to actually produce pixels.
    Every public call is also passed to `_record`.

    The host calls `begin_frame()` before drawing each frame, it resets
    the transformation, the transformation stack and lights. """

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.material = Material(util.WHITE, util.BLACK, 1)
        self.begin_frame()

    def begin_frame(self):
        self.transformation = util.Transformation.identity()
        self._stack = []
        self.ambient = util.BLACK
        self.point_lights = []

    @property
    def stack_depth(self):
        return len(self._stack)

    def background(self, color):
        color = util.wrap_color_like(color)
        self._record("background", color)
        self._clear(color)

    def ambient_light(self, color):
        color = util.wrap_color_like(color)
        self._record("ambient_light", color)
        self.ambient = self.ambient + color

    def point_light(self, color, position):
        color = util.wrap_color_like(color)
        position = util.Vector(*position)
        self._record("point_light", color, position)
        self.point_lights.append(PointLight(color,
                                            self.transformation.transform_vector(position)))

    def rotate_y(self, angle):
        """ Rotate the following drawing around the vertical axis, angle is in radians """
        self._record("rotate_y", angle)
        self._apply(util.Transformation.rotation((0, 1, 0), angle))

    def translate(self, x, y, z):
        self._record("translate", x, y, z)
        self._apply(util.Transformation.translation(x, y, z))

    def push(self):
        self._record("push")
        self._stack.append(self.transformation)

    def pop(self):
        self._record("pop")
        if not self._stack:
            raise IndexError("pop() without matching push()")
        self.transformation = self._stack.pop()

    @contextlib.contextmanager
    def pushed(self):
        """ Push the transformation and pop it again when the block is left,
        even by an exception """
        self.push()
        try:
            yield self
        finally:
            self.pop()

    def ambient_material(self, color):
        color = util.wrap_color_like(color)
        self._record("ambient_material", color)
        self.material = self.material._replace(ambient=color)

    def specular_material(self, color):
        color = util.wrap_color_like(color)
        self._record("specular_material", color)
        self.material = self.material._replace(specular=color)

    def shininess(self, value):
        """ Set the specular exponent of the material. Values below 1 are raised to 1,
        the same lower bound p5.js uses. """
        self._record("shininess", value)
        self.material = self.material._replace(shininess=max(value, 1))

    def box(self, size):
        """ Draw a cube with edge length `size` centered in the current origin """
        self._record("box", size)
        self._draw_box(self.transformation, size, self.material)

    def _apply(self, transformation):
        self.transformation = self.transformation * transformation

    def _record(self, name, *args):
        pass

    def _clear(self, color):
        pass

    def _draw_box(self, transformation, size, material):
        pass


class RecordingCanvas(Canvas):
    """ Canvas that doesn't draw anything, only keeps a list of (name, args) tuples
    of all calls made since the last `begin_frame()`. """

    def begin_frame(self):
        super().begin_frame()
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name, args))

    def call_names(self):
        return [name for name, _ in self.calls]
