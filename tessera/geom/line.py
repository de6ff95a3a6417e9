#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""Line segments and line intersection.
"""
from . import const

from .point import P


class Line(tuple):
    """An immutable line segment between two points.

    The same object also stands for the unbounded line through
    those points when intersecting.

    Args:
        p1: Start point.
        p2: End point.
    """

    def __new__(cls, p1, p2):
        return tuple.__new__(cls, (P(p1), P(p2)))

    @property
    def p1(self):
        """Start point."""
        return self[0]

    @property
    def p2(self):
        """End point."""
        return self[1]

    def intersection(self, other):
        """Where the unbounded line through this segment crosses the
        line through `other`.

        Solves ``p1 + t * d1 == q1 + u * d2`` for t using cross products.

        Args:
            other: Another line (any pair of points).

        Returns:
            The intersection point, or None if the lines are parallel
            (or coincident).
        """
        d1 = self.p2 - self.p1
        q1 = P(other[0])
        d2 = P(other[1]) - q1
        denom = d1.cross(d2)
        if abs(denom) < const.EPSILON:
            return None
        t = (q1 - self.p1).cross(d2) / denom
        return self.p1 + d1 * t

    def __repr__(self):
        return 'Line(%r, %r)' % (self.p1, self.p2)
