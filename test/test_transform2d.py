#!/usr/bin/env python

"""Test the transform2d module
"""
import math
import unittest

if __name__ == '__main__':
    import sys
    sys.path.insert(0, '..')

from tessera.geom import transform2d
from tessera.geom.point import P


class TestTransform2D(unittest.TestCase):

    SEGMENTS = (
        ((0, 0), (1, 0), (3, 4), (5, 9)),
        ((-2, 1.5), (4, -3), (0, 0), (0, 2)),
        ((10, 10), (10, 11), (-7, 2), (-9, 2)),
        ((0.5, 0.866), (2.5, 0.866), (1, 1), (1.0001, 1.0002)),
        ((0, 0), (1e-4, 0), (3, 4), (5, 9)),
        ((2, 3), (2, 3.00002), (0, 0), (1, 1)),
    )

    def test_compose_order(self):
        m = transform2d.compose_transform(
            transform2d.matrix_translate(1, 0),
            transform2d.matrix_scale_translate(2, 2, 0, 0))
        # Scale first, then translate
        self.assertEqual(P(1, 1).transform(m), P(3, 2))

    def test_match_segments(self):
        for p1, q1, p2, q2 in self.SEGMENTS:
            m = transform2d.matrix_match_segments(p1, q1, p2, q2)
            self.assertTrue(P(p1).transform(m).almost_equal(p2))
            self.assertTrue(P(q1).transform(m).almost_equal(q2))

    def test_match_degenerate_segment(self):
        with self.assertRaises(ValueError):
            transform2d.matrix_match_segments((1, 1), (1, 1), (0, 0), (1, 0))

    def test_invert(self):
        m = transform2d.compose_transform(
            transform2d.matrix_rotate(0.7, origin=(2, -1)),
            transform2d.matrix_scale_translate(3, 0.5, 0, 0))
        inv = transform2d.matrix_invert(m)
        p = P(4.25, -1.5)
        self.assertTrue(p.transform(m).transform(inv).almost_equal(p))
        identity = transform2d.compose_transform(m, inv)
        for row, irow in zip(identity, transform2d.IDENTITY_MATRIX):
            for value, ivalue in zip(row, irow):
                self.assertAlmostEqual(value, ivalue)

    def test_invert_singular(self):
        with self.assertRaises(ValueError):
            transform2d.matrix_invert(((1, 2, 0), (2, 4, 0)))

    def test_invert_small_scale(self):
        # Tiny but well conditioned transforms still invert
        m = transform2d.matrix_scale_translate(1e-4, 1e-4, 5, -2)
        inv = transform2d.matrix_invert(m)
        p = P(3, 4)
        self.assertTrue(p.transform(m).transform(inv).almost_equal(p))
        with self.assertRaises(ValueError):
            transform2d.matrix_invert(((1e-4, 2e-4, 0), (2e-4, 4e-4, 0)))

    def test_rotate_about_zero_is_identity(self):
        m = transform2d.matrix_rotate(0, origin=(3.5, -4.25))
        self.assertEqual(m, transform2d.IDENTITY_MATRIX)
        self.assertTrue(transform2d.is_identity_transform(m))

    def test_rotate_about_point(self):
        m = transform2d.matrix_rotate(math.pi / 2, origin=(1, 1))
        self.assertEqual(P(2, 1).transform(m), P(1, 2))
        self.assertEqual(P(1, 1).transform(m), P(1, 1))


if __name__ == '__main__':
    unittest.main(verbosity=2)
