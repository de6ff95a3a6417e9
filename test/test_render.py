#!/usr/bin/env python

"""Test raster and SVG rendering
"""
import os
import shutil
import tempfile
import unittest

if __name__ == '__main__':
    import sys
    sys.path.insert(0, '..')

from tessera import render
from tessera import tilings
from tessera.geom.polygon import Polygon
from tessera.svg import svg
from tessera.svg import tilesvg

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


def overlapping_squares():
    return [Polygon('a', ((10, 10), (50, 10), (50, 50), (10, 50))),
            Polygon('b', ((30, 10), (70, 10), (70, 50), (30, 50))),
            Polygon('ghost', ((75, 60), (95, 60), (95, 95), (75, 95)))]


class TestRender(unittest.TestCase):

    def config(self, **kwargs):
        args = dict(width=100, height=100, polygons=overlapping_squares(),
                    palette={'a': '#ff0000', 'b': '#0000ff'},
                    outline_color='#000000', outline_width=3,
                    background_color='#ffffff')
        args.update(kwargs)
        return render.RenderConfig(**args)

    def test_size_and_mode(self):
        image = render.render_image(self.config(width=120, height=80))
        self.assertEqual(image.size, (120, 80))
        self.assertEqual(image.mode, 'RGBA')

    def test_fills_then_strokes(self):
        image = render.render_image(self.config())
        self.assertEqual(image.getpixel((2, 2)), WHITE)
        self.assertEqual(image.getpixel((20, 30)), RED)
        self.assertEqual(image.getpixel((60, 30)), BLUE)
        # The right edge of 'a' lies inside 'b' but its outline is
        # still drawn on top of both fills.
        self.assertEqual(image.getpixel((50, 30)), BLACK)

    def test_missing_palette_role_skipped(self):
        image = render.render_image(self.config())
        # 'ghost' has no palette entry so only its outline is drawn
        self.assertEqual(image.getpixel((85, 78)), WHITE)
        self.assertEqual(image.getpixel((75, 78)), BLACK)

    def test_closing_vertex_joint(self):
        square = [Polygon('a', ((10, 10), (50, 10), (50, 50), (10, 50)))]
        image = render.render_image(self.config(
            polygons=square, palette={}, outline_width=12))
        # The first vertex is rounded like the others
        self.assertEqual(image.getpixel((8, 8)), BLACK)
        self.assertEqual(image.getpixel((52, 8)), BLACK)
        self.assertEqual(image.getpixel((52, 52)), BLACK)
        self.assertEqual(image.getpixel((8, 52)), BLACK)

    def test_no_background(self):
        image = render.render_image(self.config(background_color=None))
        self.assertEqual(image.getpixel((2, 2))[3], 0)

    def test_supersample(self):
        image = render.render_image(self.config(supersample=3))
        self.assertEqual(image.size, (100, 100))
        r, g, b, a = image.getpixel((20, 30))
        self.assertGreater(r, 200)
        self.assertLess(b, 50)

    def test_invalid_size(self):
        with self.assertRaises(ValueError):
            render.render_image(self.config(width=0))

    def test_render_tiling(self):
        image = render.render_tiling('square', {'density': 4}, 300, 200)
        self.assertEqual(image.size, (300, 200))
        self.assertEqual(image.mode, 'RGBA')
        self.assertEqual(image.getpixel((0, 0))[3], 255)

    def test_periodic_corners_covered(self):
        magenta = (255, 0, 255, 255)
        cases = (('square', {'density': 10, 'rotation': 45}, 800, 800),
                 ('square', {'density': 6, 'rotation': 30}, 1200, 300),
                 ('parallelogram', {'density': 12, 'angle': 40,
                                    'edgeRatio': 1.6, 'rotation': 45},
                  800, 800),
                 ('triangular', {'density': 8, 'baseAngle': 130,
                                 'rotation': 30}, 800, 800),
                 ('hexagonal', {'rings': 2}, 800, 800),
                 ('hexagonal', {'rings': 3, 'orientation': 'flat',
                                'rotation': 20}, 300, 900))
        for tiling_id, options, width, height in cases:
            image = render.render_tiling(tiling_id, options, width, height,
                                         palette={'background': '#ff00ff'})
            for corner in ((0, 0), (width - 1, 0), (0, height - 1),
                           (width - 1, height - 1)):
                self.assertNotEqual(image.getpixel(corner), magenta,
                                    (tiling_id, options, corner))

    def test_resolution_clamped(self):
        image = render.render_tiling('hexagonal', None, 10, 5000)
        self.assertEqual(image.size, (render.MIN_RESOLUTION,
                                      render.MAX_RESOLUTION))

    def test_unknown_tiling(self):
        with self.assertRaises(KeyError):
            render.render_tiling('nope')

    def test_tiling_render_config(self):
        config = render.tiling_render_config(
            'penrose', {'divisions': 2}, 400, 400,
            palette={'thin': '#00ff00', 'outline': '#222222'})
        self.assertEqual(config.palette['thin'], '#00ff00')
        self.assertEqual(config.palette['thick'], '#3a70b8')
        self.assertEqual(config.outline_color, '#222222')
        self.assertEqual(config.background_color, tilings.BACKGROUND_COLOR)
        self.assertEqual(len(config.polygons), 50)


class TestRenderSVG(unittest.TestCase):

    def setUp(self):
        self.config = render.RenderConfig(
            200, 100, overlapping_squares(),
            {'a': '#ff0000', 'b': 'blue'}, 'black', 1.5,
            background_color='#ffffff')

    def test_document(self):
        document = tilesvg.render_svg(self.config)
        root = document.getroot()
        self.assertEqual(root.tag, svg.svg_ns('svg'))
        self.assertEqual(root.get('width'), '200px')
        self.assertEqual(root.get('viewBox'), '0 0 200 100')

    def test_layers(self):
        root = tilesvg.render_svg(self.config).getroot()
        groups = root.findall(svg.svg_ns('g'))
        self.assertEqual([g.get('id') for g in groups],
                         ['background', 'fills', 'outlines'])
        fills = groups[1].findall(svg.svg_ns('path'))
        self.assertEqual([p.get('class') for p in fills], ['a', 'b'])
        self.assertIn('fill:#0000ff', fills[1].get('style'))
        outlines = groups[2].findall(svg.svg_ns('path'))
        self.assertEqual(len(outlines), 3)
        self.assertIn('stroke:#000000', groups[2].get('style'))
        self.assertEqual(outlines[0].get('d'),
                         'M 10.000,10.000 L 50.000,10.000 50.000,50.000'
                         ' 10.000,50.000 Z')

    def test_serialize(self):
        context = svg.SVGContext(tilesvg.render_svg(self.config, precision=1))
        text = context.to_string()
        self.assertTrue(text.startswith(b'<?xml'))
        self.assertIn(b'M 10.0,10.0 L', text)

    def test_write(self):
        context = svg.SVGContext(tilesvg.render_svg(self.config))
        tmpdir = tempfile.mkdtemp()
        try:
            path = os.path.join(tmpdir, 'tiles.svg')
            context.write(path)
            with open(path, 'rb') as stream:
                self.assertEqual(stream.read(), context.to_string())
        finally:
            shutil.rmtree(tmpdir)


if __name__ == '__main__':
    unittest.main(verbosity=2)
