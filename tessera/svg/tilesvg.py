#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Vector rendering of projected tilings as an SVG document.

The document has the same layering as the raster renderer: an optional
background rect, a group of filled polygons and a group of outlines.
"""
import logging

from . import css
from .svg import SVGContext

logger = logging.getLogger(__name__)


def _fill_style(color):
    style = {'fill': css.csscolor_to_cssrgb(color), 'stroke': 'none'}
    opacity = css.csscolor_opacity(color)
    if opacity < 1.0:
        style['fill-opacity'] = '%.3f' % opacity
    return css.dict_to_inline_style(style)

def render_svg(config, precision=None):
    """Render a :class:`tessera.render.RenderConfig` as SVG.

    Args:
        config: The render configuration. `supersample` is ignored.
        precision: Optional number of decimal places for coordinates.

    Returns:
        An lxml ElementTree.

    Raises:
        ValueError: if the surface size is not positive.
    """
    if config.width <= 0 or config.height <= 0:
        raise ValueError('Invalid surface size: %rx%r'
                         % (config.width, config.height))
    document = SVGContext.create_document(config.width, config.height)
    svg = SVGContext(document)
    if precision is not None:
        svg.set_precision(precision)

    if config.background_color:
        svg.create_rect((0, 0), config.width, config.height,
                        style=_fill_style(config.background_color),
                        parent=svg.create_group('background'))

    fill_layer = svg.create_group('fills')
    styles = {}
    for poly in config.polygons:
        color = config.palette.get(poly.role)
        if not color:
            continue
        if poly.role not in styles:
            styles[poly.role] = _fill_style(color)
        svg.create_polygon(poly.points, style=styles[poly.role],
                           parent=fill_layer, attrs={'class': poly.role})

    outline_style = css.dict_to_inline_style({
        'fill': 'none',
        'stroke': css.csscolor_to_cssrgb(config.outline_color),
        'stroke-width': svg.format_float(max(config.outline_width, 0.01)),
        'stroke-linejoin': 'round',
        'stroke-linecap': 'round',
    })
    outline_layer = svg.create_group('outlines', style=outline_style)
    for poly in config.polygons:
        svg.create_polygon(poly.points, parent=outline_layer)

    logger.debug('svg: %r', config)
    return document
