#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
A simple library of functions to parse and format CSS color and
style properties.

Color parsing is delegated to Pillow's ``ImageColor`` so that palettes
accept any CSS color Pillow understands (hex, ``rgb()``, ``hsl()``
and the SVG color names). Colors that can't be parsed become black.
"""
import string
import numbers
import logging

from PIL import ImageColor

logger = logging.getLogger(__name__)


def dict_to_inline_style(style_map):
    """Create an inline style attribute string from a dictionary
    of CSS style properties.

    Properties are sorted by name so that output is stable.
    """
    return ';'.join('%s:%s' % (name, value)
                    for name, value in sorted(style_map.items()))

def csscolor_to_rgba(css_color, opacity=None):
    """Parse a CSS color property value into an RGBA value.

    Args:
        css_color: A CSS color property string. I.e. \"#ffc0ee\" or
            \"white\".
        opacity: Optional opacity (0.0 - 1.0) that replaces the
            color's alpha channel.

    Returns:
        A tuple containing the RGBA values: (r, g, b, a).
    """
    rgba = None
    if css_color is not None:
        css_color = str(css_color).strip().lower()
        try:
            rgba = ImageColor.getcolor(css_color, 'RGBA')
        except ValueError:
            # As a last ditch effort see if it might just be
            # missing a '#' prefix.
            if css_color and all(c in string.hexdigits for c in css_color):
                try:
                    rgba = ImageColor.getcolor('#' + css_color, 'RGBA')
                except ValueError:
                    rgba = None
    if rgba is None:
        logger.debug('unparseable color %r', css_color)
        rgba = (0, 0, 0, 255)
    if opacity is not None:
        alpha = int(round(max(0.0, min(float(opacity), 1.0)) * 255))
        rgba = rgba[:3] + (alpha,)
    return tuple(rgba)

def csscolor_to_rgb(css_color):
    """Like :func:`csscolor_to_rgba` without the alpha channel."""
    return csscolor_to_rgba(css_color)[:3]

def csscolor_to_cssrgb(color):
    """A color as a #rrggbb string.

    Numbers are gray levels: floats strictly between 0 and 1 are
    fractions of full white, other values are clamped to 0-255.
    Anything unparseable becomes #000000.
    """
    if isinstance(color, numbers.Number):
        if 0.0 < color < 1.0:
            gray = int(color * 255)
        else:
            gray = max(0, min(int(color), 255))
        rgb = (gray, gray, gray)
    else:
        rgb = csscolor_to_rgb(color)
    return '#%02x%02x%02x' % rgb

def csscolor_opacity(css_color):
    """The alpha channel of a color as a float between 0 and 1."""
    return csscolor_to_rgba(css_color)[3] / 255.0
