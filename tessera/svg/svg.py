#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Minimal SVG document building on top of lxml.
"""
import sys
import logging

from lxml import etree

logger = logging.getLogger(__name__)

#: Namespace map for new documents. SVG is the default namespace.
SVG_NS = {
    None: 'http://www.w3.org/2000/svg',
    'xlink': 'http://www.w3.org/1999/xlink',
}

def svg_ns(tag):
    """The fully qualified (Clark notation) name of an SVG tag."""
    return '{%s}%s' % (SVG_NS[None], tag)

def floatystr(value):
    """Fixed point string for `value` without trailing zeros.

    Unlike '%g' this never switches to exponent notation.
    """
    return ('%f' % float(value)).rstrip('0').rstrip('.')


class SVGContext(object):
    """Builds elements into an SVG document.

    Args:
        document: An lxml ElementTree or the root svg Element.
    """
    #: Digits after the decimal point in coordinates.
    DEFAULT_PRECISION = 3

    @classmethod
    def create_document(cls, width, height, doc_id=None, units='px'):
        """A new, empty SVG ElementTree.

        The viewBox spans (0, 0) to (width, height) so user units
        equal pixels.
        """
        root = etree.Element(svg_ns('svg'), nsmap=SVG_NS)
        width = floatystr(width)
        height = floatystr(height)
        root.set('width', width + units)
        root.set('height', height + units)
        root.set('viewBox', '0 0 %s %s' % (width, height))
        if doc_id is not None:
            root.set('id', doc_id)
        return etree.ElementTree(root)

    def __init__(self, document):
        self.document = document
        if hasattr(document, 'getroot'):
            self.docroot = document.getroot()
        else:
            self.docroot = document
        self.current_parent = self.docroot
        self.set_precision(self.DEFAULT_PRECISION)

    def set_precision(self, precision):
        """Set the number of digits written after the decimal point."""
        self._fmt_float = '%%.%df' % precision
        self._fmt_point = '%s,%s' % (self._fmt_float, self._fmt_float)

    def format_float(self, value):
        """`value` formatted at the current precision."""
        return self._fmt_float % value

    def to_string(self):
        """The document serialized as UTF-8 bytes."""
        return etree.tostring(self.document, encoding='UTF-8',
                              pretty_print=True, xml_declaration=True)

    def write(self, filename=None):
        """Write the document to `filename`, or stdout if None."""
        if filename is None:
            sys.stdout.buffer.write(self.to_string())
        else:
            with open(filename, 'wb') as stream:
                stream.write(self.to_string())
            logger.debug('wrote %s', filename)

    def create_group(self, group_id=None, style=None, parent=None):
        """Append a ``g`` element."""
        attrs = {}
        if group_id is not None:
            attrs['id'] = group_id
        if style:
            attrs['style'] = style
        return self._append('g', attrs, parent)

    def create_rect(self, position, width, height, style=None, parent=None):
        """Append a ``rect`` element with its corner at `position`."""
        attrs = {'x': self.format_float(position[0]),
                 'y': self.format_float(position[1]),
                 'width': self.format_float(width),
                 'height': self.format_float(height)}
        if style:
            attrs['style'] = style
        return self._append('rect', attrs, parent)

    def create_polygon(self, vertices, close_path=True,
                       style=None, parent=None, attrs=None):
        """Append a ``path`` through `vertices`.

        Args:
            vertices: Sequence of (x, y) points.
            close_path: End the path data with 'Z'.
            style: Optional inline CSS style.
            parent: Parent element. Default is the current parent.
            attrs: Extra element attributes.

        Returns:
            The new element, or None if there are no vertices.
        """
        if not vertices:
            return None
        points = [self._fmt_point % (p[0], p[1]) for p in vertices]
        d = ['M', points[0]]
        if len(points) > 1:
            d.append('L')
            d.extend(points[1:])
        if close_path:
            d.append('Z')
        attrs = dict(attrs) if attrs else {}
        attrs['d'] = ' '.join(d)
        return self.create_path(attrs, style, parent)

    def create_path(self, attrs, style=None, parent=None):
        """Append a ``path`` element with the given attributes."""
        if style is not None:
            attrs['style'] = style
        return self._append('path', attrs, parent)

    def _append(self, tag, attrs, parent):
        if parent is None:
            parent = self.current_parent
        return etree.SubElement(parent, svg_ns(tag), attrs)
