import math
import collections
import numpy


class Vector(collections.namedtuple("Vector", "x y z")):
    __slots__ = ()

    def __new__(cls, x, y, z=0):
        return super().__new__(cls, x, y, z)

    def __add__(self, other):
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        return Vector(self.x * other, self.y * other, self.z * other)

    def __truediv__(self, other):
        return Vector(self.x / other, self.y / other, self.z / other)

    def __neg__(self):
        return Vector(-self.x, -self.y, -self.z)

    def __abs__(self):
        return math.sqrt(self.abs_squared())

    def abs_squared(self):
        return self.dot(self)

    def elementwise_abs(self):
        return Vector(abs(self.x), abs(self.y), abs(self.z))

    def max(self, other=None):
        return self._minmax(other, max)

    def min(self, other=None):
        return self._minmax(other, min)

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        return Vector(self.y * other.z - self.z * other.y,
                      self.z * other.x - self.x * other.z,
                      self.x * other.y - self.y * other.x)

    def normalized(self):
        return self / abs(self)

    def _minmax(self, other, op):
        if other is None:
            return op(self.x, self.y, self.z)
        else:
            return Vector(op(self.x, other.x),
                          op(self.y, other.y),
                          op(self.z, other.z))

    def as_array(self):
        return numpy.array((self.x, self.y, self.z), dtype=numpy.float64)


class BoundingBox(collections.namedtuple("BoundingBox", "a b")):
    __slots__ = ()

    @classmethod
    def containing(cls, vector_iterable):
        a = Vector(float("inf"), float("inf"), float("inf"))
        b = -a

        for v in vector_iterable:
            a = a.min(v)
            b = b.max(v)

        return cls(a, b)


class Quaternion(collections.namedtuple("Quaternion", "v w")):
    # http://www.cs.ucr.edu/~vbz/resources/quatut.pdf
    __slots__ = ()

    @classmethod
    def from_radians(cls, axis, angle):
        phi = angle / 2
        axis = Vector(*axis)
        return cls(axis.normalized() * math.sin(phi), math.cos(phi))

    @classmethod
    def identity(cls):
        return cls(Vector(0, 0, 0), 1)

    def __mul__(self, other):
        return Quaternion(self.v * other.w + other.v * self.w + self.v.cross(other.v),
                          self.w * other.w - self.v.dot(other.v))

    def transform_vector(self, vector):
        return (self.v * self.v.dot(vector) + self.v.cross(vector) * self.w) * 2 + \
                vector * (self.w * self.w - self.v.abs_squared())

    def as_matrix(self):
        """ Return a 3x3 rotation matrix (numpy array) that represents the same rotation.
        Columns are images of the base vectors. """
        return numpy.array([self.transform_vector(Vector(1, 0, 0)),
                            self.transform_vector(Vector(0, 1, 0)),
                            self.transform_vector(Vector(0, 0, 1))],
                           dtype=numpy.float64).T


class Transformation(collections.namedtuple("Transformation", "quaternion offset")):
    """ Rotation quaternion and a vector offset """
    __slots__ = ()

    @classmethod
    def identity(cls):
        return cls(Quaternion.identity(), Vector(0, 0, 0))

    @classmethod
    def translation(cls, x, y, z):
        return cls(Quaternion.identity(), Vector(x, y, z))

    @classmethod
    def rotation(cls, axis, angle):
        """ Rotation around axis by angle in radians, right handed """
        return cls(Quaternion.from_radians(axis, angle), Vector(0, 0, 0))

    def __mul__(self, other):
        """ Combines two transformations into one,
        order is "second * first" """
        return Transformation(self.quaternion * other.quaternion,
                              self.offset + self.quaternion.transform_vector(other.offset))

    def transform_vector(self, vector):
        return self.quaternion.transform_vector(vector) + self.offset

    def as_matrix(self):
        """
        Return a 4x4 numpy array that represents the same transformation.
        """
        ret = numpy.identity(4)
        ret[:3, :3] = self.quaternion.as_matrix()
        ret[:3, 3] = self.offset
        return ret
