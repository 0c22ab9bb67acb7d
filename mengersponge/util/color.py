import collections
import numbers


class Color(collections.namedtuple("Color", "r g b")):
    """ RGB color with channels in range 0 to 255.
    Channels may be floats, hosts quantize them when drawing. """
    __slots__ = ()

    @classmethod
    def gray(cls, value):
        return cls(value, value, value)

    def __add__(self, other):
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def clamped(self):
        return Color(*(min(max(c, 0), 255) for c in self))

    def quantized(self):
        return tuple(int(round(c)) for c in self.clamped())


def wrap_color_like(value):
    """ Gray scalars are turned into gray colors, triples into Color. """
    if isinstance(value, Color):
        return value
    if isinstance(value, numbers.Real):
        return Color.gray(value)

    try:
        r, g, b = value
    except (TypeError, ValueError):
        raise TypeError("Value must be a number or a triple of numbers to be color-like")
    return Color(r, g, b)


def lerp_color(a, b, t):
    """ Linear interpolation between two colors, t = 0 gives a, t = 1 gives b """
    a = wrap_color_like(a)
    b = wrap_color_like(b)
    return Color(*(x + (y - x) * t for x, y in zip(a, b)))


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)
