#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Immutable 2D point/vector used by every tiling generator.
"""
import math

from . import transform2d
from . import const


class P(tuple):
    """A point (or vector) in the plane as a plain (x, y) float tuple.

    Since it is just a tuple, a P can be handed straight to Pillow's
    drawing functions.

    Equality is approximate: two points are equal when they are closer
    than ``const.EPSILON``. This lets generated vertices that should
    coincide compare equal despite floating point drift.

    Args:
        x: X coordinate, or an (x, y) sequence if `y` is None.
        y: Y coordinate.
    """
    __slots__ = ()

    def __new__(cls, x, y=None):
        if y is None:
            x, y = x[0], x[1]
        return tuple.__new__(cls, (float(x), float(y)))

    @property
    def x(self):
        """Horizontal coordinate."""
        return self[0]

    @property
    def y(self):
        """Vertical coordinate."""
        return self[1]

    @staticmethod
    def from_polar(r, angle):
        """The point at distance `r` from the origin in direction `angle`
        (radians, counter-clockwise from the X axis).
        """
        return P(r * math.cos(angle), r * math.sin(angle))

    def is_zero(self):
        """True if this vector is shorter than EPSILON."""
        return self.almost_equal((0.0, 0.0))

    def almost_equal(self, other, tolerance=None):
        """True if `other` is closer than `tolerance` (default EPSILON)."""
        if tolerance is None:
            tolerance = const.EPSILON
        return self.distance(other) < tolerance

    def length(self):
        """Distance from the origin."""
        return math.hypot(self[0], self[1])

    def cross(self, other):
        """The 2D cross (perp-dot) product with `other`."""
        return self[0] * other[1] - self[1] * other[0]

    def distance(self, other):
        """Euclidean distance to `other`."""
        return math.hypot(self[0] - other[0], self[1] - other[1])

    def lerp(self, other, mu):
        """The point a fraction `mu` of the way from here to `other`."""
        return P(self[0] + (other[0] - self[0]) * mu,
                 self[1] + (other[1] - self[1]) * mu)

    def transform(self, matrix):
        """This point mapped through an affine `matrix`."""
        return P(transform2d.matrix_apply_to_point(matrix, self))

    def __eq__(self, other):
        return other is not None and self.almost_equal(other)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        # Coarse grid hash, consistent with approximate equality
        # for all but points straddling a cell boundary.
        return hash((int(math.floor(self[0])), int(math.floor(self[1]))))

    def __bool__(self):
        return not self.is_zero()

    def __neg__(self):
        return P(-self[0], -self[1])

    def __add__(self, other):
        if isinstance(other, (int, float)):
            return P(self[0] + other, self[1] + other)
        return P(self[0] + other[0], self[1] + other[1])

    def __sub__(self, other):
        if isinstance(other, (int, float)):
            return P(self[0] - other, self[1] - other)
        return P(self[0] - other[0], self[1] - other[1])

    def __mul__(self, scalar):
        return P(self[0] * scalar, self[1] * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return P(self[0] / scalar, self[1] / scalar)

    def __abs__(self):
        return self.length()

    def __repr__(self):
        return 'P(%r, %r)' % (self[0], self[1])
