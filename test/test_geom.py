#!/usr/bin/env python

"""Test the basic geometry classes: points, lines, boxes and polygons
"""
import unittest

if __name__ == '__main__':
    import sys
    sys.path.insert(0, '..')

from tessera.geom import polygon
from tessera.geom.point import P
from tessera.geom.line import Line
from tessera.geom.box import Box
from tessera.geom.polygon import Polygon

SQUARE_CCW = ((0, 0), (2, 0), (2, 2), (0, 2))


class TestGeom(unittest.TestCase):

    def test_line_intersection(self):
        p = Line((0, 0), (2, 2)).intersection(Line((0, 2), (2, 0)))
        self.assertEqual(p, P(1, 1))
        # Unbounded lines intersect outside the segments
        p = Line((0, 0), (1, 0)).intersection(Line((3, 1), (3, 2)))
        self.assertEqual(p, P(3, 0))

    def test_parallel_lines(self):
        self.assertIsNone(Line((0, 0), (1, 1)).intersection(
            Line((0, 1), (1, 2))))

    def test_empty_bounds(self):
        bounds = Box.from_polygons([])
        self.assertEqual(bounds.p1, P(0, 0))
        self.assertEqual(bounds.p2, P(0, 0))
        self.assertEqual(bounds.width(), 0)
        self.assertEqual(bounds.height(), 0)

    def test_bounds(self):
        polys = [Polygon('a', ((1, 2), (3, -1), (0, 0))),
                 Polygon('b', ((-4, 5), (0, 0), (1, 1)))]
        bounds = Box.from_polygons(polys)
        self.assertEqual(bounds.p1, P(-4, -1))
        self.assertEqual(bounds.p2, P(3, 5))
        self.assertEqual(bounds.center, P(-0.5, 2))
        self.assertEqual(polys[0].bounding_box(), Box(P(0, -1), P(3, 2)))

    def test_signed_area(self):
        self.assertAlmostEqual(polygon.area(SQUARE_CCW), 4.0)
        self.assertAlmostEqual(polygon.area(SQUARE_CCW[::-1]), -4.0)

    def test_orient_ccw(self):
        cw = Polygon('x', SQUARE_CCW[::-1])
        ccw = cw.oriented_ccw()
        self.assertGreater(ccw.area(), 0)
        self.assertEqual(ccw.points[0], cw.points[0])
        self.assertEqual(set(ccw.points), set(cw.points))
        # Already CCW polygons are returned as is
        poly = Polygon('x', SQUARE_CCW)
        self.assertIs(poly.oriented_ccw(), poly)

    def test_vertex_centroid(self):
        self.assertEqual(polygon.vertex_centroid(SQUARE_CCW), P(1, 1))

    def test_point_inside(self):
        self.assertTrue(polygon.point_inside(SQUARE_CCW, (1, 1)))
        self.assertFalse(polygon.point_inside(SQUARE_CCW, (3, 1)))

    def test_center_polygons(self):
        polys = polygon.center_polygons([Polygon('a', SQUARE_CCW)])
        bounds = Box.from_polygons(polys)
        self.assertEqual(bounds.center, P(0, 0))
        self.assertEqual(polys[0].role, 'a')
        self.assertEqual(polygon.center_polygons([]), [])


if __name__ == '__main__':
    unittest.main(verbosity=2)
