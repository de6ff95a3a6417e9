#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Raster rendering of projected tilings using Pillow.

Rendering is done in two passes: every polygon whose role has a palette
color is filled, then every polygon outline is stroked, so that no fill
can hide an outline.

Example::

    image = render.render_tiling('hexagonal', {'rings': 5}, 800, 600)
    image.save('hex.png')
"""
import time
import logging

from PIL import Image, ImageDraw

from . import tilings
from . import projection
from .svg import css

logger = logging.getLogger(__name__)

MIN_RESOLUTION = 256
MAX_RESOLUTION = 4096


class RenderConfig(object):
    """Everything needed to paint one picture.

    Args:
        width: Surface width in pixels.
        height: Surface height in pixels.
        polygons: Polygons in pixel coordinates.
        palette: Mapping of role to CSS color.
        outline_color: CSS color of the outlines.
        outline_width: Outline stroke width in pixels.
        background_color: Optional CSS background color.
        supersample: Integer oversampling factor for anti-aliasing.
    """
    def __init__(self, width, height, polygons, palette, outline_color,
                 outline_width, background_color=None, supersample=1):
        self.width = width
        self.height = height
        self.polygons = polygons
        self.palette = palette
        self.outline_color = outline_color
        self.outline_width = outline_width
        self.background_color = background_color
        self.supersample = supersample

    def __repr__(self):
        return ('RenderConfig(%dx%d, polygons=%d, outline=%r/%f)'
                % (self.width, self.height, len(self.polygons),
                   self.outline_color, self.outline_width))


def clamp_resolution(value):
    """Round and clamp a pixel dimension to the supported range."""
    return min(max(int(round(value)), MIN_RESOLUTION), MAX_RESOLUTION)

def _scaled_points(points, factor):
    return [(p[0] * factor, p[1] * factor) for p in points]

def render_image(config):
    """Paint a :class:`RenderConfig` onto a new RGBA image.

    Returns:
        A PIL Image of exactly `config.width` x `config.height` pixels.

    Raises:
        ValueError: if the surface size is not positive.
    """
    if config.width <= 0 or config.height <= 0:
        raise ValueError('Invalid surface size: %rx%r'
                         % (config.width, config.height))
    start = time.time()
    factor = max(1, int(config.supersample))
    size = (int(config.width) * factor, int(config.height) * factor)
    image = Image.new('RGBA', size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)

    if config.background_color:
        draw.rectangle([0, 0, size[0], size[1]],
                       fill=css.csscolor_to_rgba(config.background_color))

    fill_colors = {}
    for role, color in config.palette.items():
        if color:
            fill_colors[role] = css.csscolor_to_rgba(color)
    fill_count = 0
    for poly in config.polygons:
        fill = fill_colors.get(poly.role)
        if fill is None or len(poly.points) < 3:
            continue
        draw.polygon(_scaled_points(poly.points, factor), fill=fill)
        fill_count += 1

    stroke = css.csscolor_to_rgba(config.outline_color)
    stroke_width = max(1, int(round(max(config.outline_width, 0.01)
                                    * factor)))
    for poly in config.polygons:
        if len(poly.points) < 2:
            continue
        pts = _scaled_points(poly.points, factor)
        # Repeat the first edge so the closing vertex gets a joint too
        draw.line(pts + [pts[0], pts[1]], fill=stroke, width=stroke_width,
                  joint='curve')

    if factor > 1:
        image = image.resize((int(config.width), int(config.height)),
                             Image.Resampling.LANCZOS)
    logger.debug('render: %r, filled=%d, %.3fs',
                 config, fill_count, time.time() - start)
    return image

def tiling_render_config(tiling_id, options=None, width=1024, height=1024,
                         palette=None, supersample=1):
    """Generate, project and style a tiling.

    Args:
        tiling_id: Registered tiling id.
        options: Parameter record. Clamped to the tiling's schema.
        width: Surface width. Clamped to the supported resolution range.
        height: Surface height. Clamped to the supported resolution range.
        palette: Mapping of role to color. Missing roles take the
            tiling's default colors.
        supersample: Oversampling factor.

    Returns:
        A :class:`RenderConfig`.

    Raises:
        KeyError: if the tiling id is unknown.
    """
    tiling = tilings.get_tiling(tiling_id)
    params = tiling.normalize(options)
    width = clamp_resolution(width)
    height = clamp_resolution(height)
    colors = tiling.default_palette()
    if palette:
        colors.update(palette)
    polygons = tiling.generate(params)
    projected = projection.project_tiling(tiling, polygons, width, height,
                                          params)
    return RenderConfig(width, height, projected.polygons, colors,
                        tiling.outline_color(colors),
                        tiling.outline_width(projected.scale, params),
                        background_color=tiling.background_color(colors),
                        supersample=supersample)

def render_tiling(tiling_id, options=None, width=1024, height=1024,
                  palette=None, supersample=1):
    """Render a tiling to a new RGBA image in one call.

    See :func:`tiling_render_config` for the arguments.
    """
    return render_image(tiling_render_config(tiling_id, options, width,
                                             height, palette, supersample))
