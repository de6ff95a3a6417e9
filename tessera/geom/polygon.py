#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Tagged polygons and some handy polygon tools such as area, orientation,
and centroid calculations.

A tiling is just an ordered list of :class:`Polygon` records. Each record
carries a role tag that names its color bucket and a closed sequence of
vertices (the first vertex is not repeated at the end).

Some references:
http://paulbourke.net/geometry/
http://geomalgorithms.com/index.html
"""
import collections

from . import box
from . import transform2d

from .point import P


def area(vertices):
    """Return the signed area of a simple polygon.

    Args:
        vertices: the polygon vertices. A list of 2-tuple (x, y) points.

    Returns (float):
        The area of the polygon. The area will be negative if the
        vertices are ordered clockwise.
    """
    area = 0.0
    for n in range(-1, len(vertices) - 1):
        p1 = vertices[n]
        p2 = vertices[n + 1]
        # Accumulate the cross product of each pair of vertices
        area += ((p1[0] * p2[1]) - (p2[0] * p1[1]))
    return area / 2

def vertex_centroid(vertices):
    """The average of the polygon vertices.

    This is not the same as the area centroid but it is stable
    for any vertex sequence and cheap to compute.
    """
    n = len(vertices)
    if n == 0:
        return P(0.0, 0.0)
    x = sum(p[0] for p in vertices)
    y = sum(p[1] for p in vertices)
    return P(x / n, y / n)

def orient_ccw(vertices):
    """Return the vertices in counter-clockwise order.

    Clockwise vertex sequences are reversed, keeping the first vertex
    in place.
    """
    if area(vertices) < 0:
        return [vertices[0]] + list(reversed(vertices[1:]))
    return list(vertices)

def point_inside(vertices, p):
    """Return True if point `p` is inside the polygon defined by `vertices`.

    See: http://www.ecse.rpi.edu/Homepages/wrf/Research/Short_Notes/pnpoly.html
    """
    is_inside = False
    x, y = p
    j = -1
    for i in range(len(vertices)):
        x1, y1 = vertices[i]
        x2, y2 = vertices[j]
        if (y1 > y) != (y2 > y) and x < ((x2 - x1) * (y - y1) / (y2 - y1)) + x1:
            is_inside = not is_inside
        j = i
    return is_inside


class Polygon(collections.namedtuple('Polygon', ('role', 'points'))):
    """A closed polygon tagged with a color role.

    Args:
        role: Role tag (ie 'thin', 'hat-h', 'primary').
        points: Ordered vertices. The first vertex is not repeated.
    """
    __slots__ = ()

    def __new__(cls, role, points):
        return super(Polygon, cls).__new__(cls, role,
                                           tuple(P(p) for p in points))

    def area(self):
        """Signed area. Positive if the vertices are counter-clockwise."""
        return area(self.points)

    def vertex_centroid(self):
        """The average of the vertices."""
        return vertex_centroid(self.points)

    def bounding_box(self):
        """Axis aligned bounding box of the vertices."""
        return box.Box.from_points(self.points)

    def transform(self, matrix):
        """Return a copy of this polygon with the transform matrix applied."""
        return Polygon(self.role, [p.transform(matrix) for p in self.points])

    def oriented_ccw(self):
        """Return a copy of this polygon with counter-clockwise winding."""
        if self.area() < 0:
            return Polygon(self.role, orient_ccw(self.points))
        return self


def transform_polygons(polygons, matrix):
    """Apply a transform matrix to every polygon in a list."""
    if transform2d.is_identity_transform(matrix):
        return list(polygons)
    return [poly.transform(matrix) for poly in polygons]

def center_polygons(polygons):
    """Translate a polygon list so that its bounding box
    is centered on the origin.
    """
    polygons = list(polygons)
    if not polygons:
        return polygons
    center = box.Box.from_polygons(polygons).center
    return transform_polygons(polygons,
                              transform2d.matrix_translate(-center.x,
                                                           -center.y))

def rotate_polygons(polygons, angle):
    """Rotate a polygon list about the origin by `angle` radians."""
    if angle == 0:
        return list(polygons)
    return transform_polygons(polygons, transform2d.matrix_rotate(angle))

def orient_polygons_ccw(polygons):
    """Return the polygon list with every polygon wound counter-clockwise."""
    return [poly.oriented_ccw() for poly in polygons]
