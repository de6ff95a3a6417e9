#!/usr/bin/env python

"""Test the hat monotile substitution tiling
"""
import collections
import math
import unittest
from unittest import mock

if __name__ == '__main__':
    import sys
    sys.path.insert(0, '..')

from tessera.geom import hat
from tessera.geom import polygon

HAT_ROLES = ('hat-h', 'hat-t', 'hat-p', 'hat-f')


def hats_only(polygons):
    return [poly for poly in polygons if poly.role in HAT_ROLES]


class TestHat(unittest.TestCase):

    def test_seed_hat_count(self):
        polygons = hat.generate(1)
        self.assertEqual(len(polygons), 77)
        self.assertEqual(len(hats_only(polygons)), 77)
        self.assertEqual(hat.hat_count(1), 77)

    def test_roles(self):
        roles = set(poly.role for poly in hat.generate(1))
        self.assertEqual(roles, set(HAT_ROLES))

    def test_hat_outline(self):
        self.assertEqual(len(hat.HAT_OUTLINE), 13)
        for poly in hat.generate(1):
            self.assertEqual(len(poly.points), 13)

    def test_monotonic_growth(self):
        counts = [len(hat.generate(n)) for n in (1, 2, 3)]
        self.assertEqual(counts, [hat.hat_count(n) for n in (1, 2, 3)])
        self.assertEqual(counts, [77, 526, 3603])

    def test_iterations_clamped(self):
        self.assertEqual(len(hat.generate(0)), 77)
        self.assertEqual(len(hat.generate(-3)), 77)
        self.assertEqual(len(hat.generate(1.4)), 77)

    def test_congruent_hats(self):
        areas = [abs(poly.area()) for poly in hat.generate(2)]
        for area in areas:
            self.assertAlmostEqual(area, areas[0], places=6)

    def test_no_coincident_hats(self):
        centers = sorted(poly.vertex_centroid() for poly in hat.generate(1))
        for i, a in enumerate(centers):
            for b in centers[i + 1:]:
                self.assertGreater(a.distance(b), 0.1)

    def test_hats_do_not_overlap(self):
        # Count the hats covering each point of a fine sample grid.
        # The published patch rules leave one overlap of two kites
        # (a quarter hat) between neighbouring placements, so allow
        # that and no more.
        hats = hat.generate(1)
        hat_area = abs(hats[0].area())
        step = 0.125
        offset = 0.0123
        hits = collections.Counter()
        def grid_range(lo, hi):
            return range(int(math.ceil((lo - offset) / step)),
                         int(math.floor((hi - offset) / step)) + 1)
        for poly in hats:
            bounds = poly.bounding_box()
            for ix in grid_range(bounds.xmin, bounds.xmax):
                for iy in grid_range(bounds.ymin, bounds.ymax):
                    p = (ix * step + offset, iy * step + offset)
                    if polygon.point_inside(poly.points, p):
                        hits[(ix, iy)] += 1
        overlap = sum(n - 1 for n in hits.values()) * step * step
        self.assertLess(overlap, hat_area / 2)
        covered = len(hits) * step * step
        self.assertGreater(covered, (len(hats) - 1) * hat_area)

    def test_supertile_levels(self):
        polygons = hat.generate(1, include_supertiles=True)
        supertiles = [p for p in polygons if p.role.startswith('supertile-')]
        self.assertEqual(len(supertiles), 29)
        self.assertEqual(len(hats_only(polygons)), 77)
        polygons = hat.generate(2, include_supertiles=True)
        supertiles = [p for p in polygons if p.role.startswith('supertile-')]
        self.assertEqual(len(supertiles), 29 + 201)
        self.assertEqual(len(hats_only(polygons)), 526)

    def test_supertiles_before_hats(self):
        polygons = hat.generate(2, include_supertiles=True)
        kinds = [poly.role.startswith('supertile-') for poly in polygons]
        first_hat = kinds.index(False)
        self.assertTrue(all(kinds[:first_hat]))
        self.assertFalse(any(kinds[first_hat:]))

    def test_centered(self):
        bounds = polygon.box.Box.from_polygons(hat.generate(2))
        self.assertAlmostEqual(bounds.center.x, 0.0)
        self.assertAlmostEqual(bounds.center.y, 0.0)

    def test_deterministic(self):
        self.assertEqual(hat.generate(2, True), hat.generate(2, True))

    def test_metatiles_recentred(self):
        arena = hat.ShapeArena()
        tiles = hat.initial_metatiles(arena)
        for label in 'HTPF':
            shape = arena[tiles[label]]
            self.assertEqual(shape.super_role, hat.SUPERTILE_ROLES[label])
            self.assertIsNone(shape.role)
            c = polygon.vertex_centroid(shape.outline)
            self.assertAlmostEqual(c.x, 0.0)
            self.assertAlmostEqual(c.y, 0.0)
        self.assertEqual(len(arena[tiles['H']].children), 4)
        self.assertEqual(len(arena[tiles['T']].children), 1)
        self.assertEqual(len(arena[tiles['P']].children), 2)
        self.assertEqual(len(arena[tiles['F']].children), 2)

    def test_metatile_width_doubles(self):
        arena = hat.ShapeArena()
        tiles = hat.initial_metatiles(arena)
        patch = hat.construct_patch(arena, tiles)
        self.assertEqual(len(arena[patch].children), len(hat.PATCH_RULES))
        self.assertIsNone(arena[patch].super_role)
        next_tiles = hat.construct_metatiles(arena, patch)
        for label in 'HTPF':
            self.assertEqual(arena[next_tiles[label]].width,
                             2 * arena[tiles[label]].width)

    def test_bad_rule_index(self):
        for rules in ((('H',), (5, 0, 'P', 2)),
                      (('H',), (-1, 0, 'P', 2)),
                      (('H',), (0, 40, 'P', 2)),
                      (('H',), (0, 0, 'P', 2), (0, 1, 1, 99, 'F', 0))):
            with mock.patch.object(hat, 'PATCH_RULES', rules):
                arena = hat.ShapeArena()
                tiles = hat.initial_metatiles(arena)
                with self.assertRaises(hat.SubstitutionError):
                    hat.construct_patch(arena, tiles)

    def test_bad_child_index(self):
        arena = hat.ShapeArena()
        tiles = hat.initial_metatiles(arena)
        with self.assertRaises(hat.SubstitutionError):
            arena.child(tiles['T'], 1)
        with self.assertRaises(hat.SubstitutionError):
            arena.eval_child(tiles['T'], 0, 13)
        with self.assertRaises(hat.SubstitutionError):
            arena.eval_child(tiles['T'], -1, 0)

    def test_degenerate_match(self):
        with self.assertRaises(hat.SubstitutionError):
            hat.match_two((1, 1), (1, 1), (0, 0), (1, 0))


if __name__ == '__main__':
    unittest.main(verbosity=2)
