#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Axis aligned bounding boxes.
"""
from .point import P


class Box(tuple):
    """An immutable axis aligned rectangle stored as its
    (min, min) and (max, max) corners.

    The corners may be given in any order.
    """
    def __new__(cls, p1, p2):
        return tuple.__new__(Box, (P(min(p1[0], p2[0]), min(p1[1], p2[1])),
                                   P(max(p1[0], p2[0]), max(p1[1], p2[1]))))

    @staticmethod
    def from_points(points):
        """The smallest Box holding every point.

        No points at all gives a zero sized box at the origin.
        """
        xs = []
        ys = []
        for p in points:
            xs.append(p[0])
            ys.append(p[1])
        if not xs:
            return Box((0.0, 0.0), (0.0, 0.0))
        return Box((min(xs), min(ys)), (max(xs), max(ys)))

    @staticmethod
    def from_polygons(polygons):
        """The smallest Box holding every vertex of every polygon.

        Args:
            polygons: :class:`polygon.Polygon` records or plain
                vertex sequences.
        """
        return Box.from_points(p for poly in polygons
                               for p in getattr(poly, 'points', poly))

    @property
    def p1(self):
        """Minimum corner."""
        return self[0]

    @property
    def p2(self):
        """Maximum corner."""
        return self[1]

    @property
    def xmin(self):
        return self[0][0]

    @property
    def xmax(self):
        return self[1][0]

    @property
    def ymin(self):
        return self[0][1]

    @property
    def ymax(self):
        return self[1][1]

    @property
    def center(self):
        """Midpoint of the box."""
        return self.p1.lerp(self.p2, 0.5)

    def width(self):
        """Extent along the X axis."""
        return self.xmax - self.xmin

    def height(self):
        """Extent along the Y axis."""
        return self.ymax - self.ymin

