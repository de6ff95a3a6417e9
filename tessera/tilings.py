#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Registry of tiling definitions.

A :class:`TilingDefinition` bundles a generator function with its
parameter schema, its color roles and the framing policy (scale
multiplier, padding, overscan, frame radius and outline width) used
when it is projected onto a canvas. Definitions are created once at
import time and never modified.

Example::

    tiling = tilings.get_tiling('penrose')
    polygons = tiling.generate({'divisions': 5})
"""
import logging

from .geom import polygon
from .geom import penrose
from .geom import hat
from .geom import lattice

from .options import Slider, Select, ColorRole
from .options import FILL, OUTLINE, BACKGROUND
from . import options as _options

logger = logging.getLogger(__name__)

# Canvas padding (pixels) for tilings that should not touch the edges
DEFAULT_PADDING = 48
# Zoom applied to cover framed tilings
OVERSCAN_FACTOR = 1.12
# Outline color used when a palette has no outline role
FALLBACK_OUTLINE_COLOR = '#1e293b'
BACKGROUND_COLOR = '#f8fafc'


def fallback_outline_width(scale):
    """Outline width for tilings that do not declare one."""
    return max(scale * 0.015, 0.4)


class TilingDefinition(object):
    """A tiling family.

    Args:
        id: Unique identifier.
        name: Display name.
        tagline: Short description.
        controls: Parameter schema. A sequence of
            :class:`options.Slider` and :class:`options.Select`.
        color_roles: A sequence of :class:`options.ColorRole`.
        generator: Function that takes a normalized parameter dict and
            returns a list of :class:`polygon.Polygon` in local units.
        scale_multiplier: Optional function of the parameters that
            scales the fit-to-canvas projection.
        outline_width: Optional function of (scale, parameters) that
            returns the stroke width in pixels.
        padding: Canvas padding in pixels.
        overscan: Multiplicative projection overscan.
        frame_radius: Optional function of the parameters that returns
            the radius of a circle about the origin the generated
            polygons are known to cover. The canvas is then framed
            inside that circle instead of around the bounding box.
    """
    def __init__(self, id, name, tagline, controls, color_roles, generator,
                 scale_multiplier=None, outline_width=None,
                 padding=0, overscan=1.0, frame_radius=None):
        self.id = id
        self.name = name
        self.tagline = tagline
        self.controls = tuple(controls)
        self.color_roles = tuple(color_roles)
        self.generator = generator
        self._scale_multiplier = scale_multiplier
        self._outline_width = outline_width
        self.padding = padding
        self.overscan = overscan
        self._frame_radius = frame_radius

    @property
    def defaults(self):
        """Default parameter record."""
        return _options.default_options(self.controls)

    def normalize(self, options=None):
        """Complete and clamp a parameter record."""
        return _options.normalize_options(self.controls, options)

    def generate(self, options=None):
        """Generate the tiling polygons.

        Args:
            options: Parameter record. Missing or out of range values
                are replaced or clamped.

        Returns:
            A list of counter-clockwise :class:`polygon.Polygon`
            centered near the origin.
        """
        params = self.normalize(options)
        polygons = self.generator(params)
        logger.debug('%s: %r -> %d polygons', self.id, params, len(polygons))
        return polygon.orient_polygons_ccw(polygons)

    def scale_multiplier(self, options=None):
        """Projection scale multiplier for a parameter record."""
        if self._scale_multiplier is None:
            return 1.0
        return self._scale_multiplier(self.normalize(options))

    def frame_radius(self, options=None):
        """Covered radius for cover framing, or None to fit the bounds."""
        if self._frame_radius is None:
            return None
        return self._frame_radius(self.normalize(options))

    def outline_width(self, scale, options=None):
        """Outline stroke width for a projected scale."""
        if self._outline_width is None:
            return fallback_outline_width(scale)
        return self._outline_width(scale, self.normalize(options))

    def default_palette(self):
        """Map each color role to its default color."""
        return _options.default_palette(self.color_roles)

    def outline_color(self, palette=None):
        """The outline color from a palette, falling back to the role
        default and then to :data:`FALLBACK_OUTLINE_COLOR`.
        """
        role = _options.role_for_category(self.color_roles, OUTLINE)
        if role is None:
            return FALLBACK_OUTLINE_COLOR
        if palette and palette.get(role.id):
            return palette[role.id]
        return role.default

    def background_color(self, palette=None):
        """The background color from a palette or the role default."""
        role = _options.role_for_category(self.color_roles, BACKGROUND)
        if role is None:
            return None
        if palette and palette.get(role.id):
            return palette[role.id]
        return role.default

    def __repr__(self):
        return 'TilingDefinition(%r)' % self.id


def _background():
    return ColorRole('background', 'Background', BACKGROUND_COLOR, BACKGROUND)

def _rotation_control(description):
    return Slider('rotation', 'Rotation (deg)', 0, 180, 0, step=1,
                  description=description)

def _edge_ratio_control(description):
    return Slider('edgeRatio', 'Edge ratio', 0.4, 2, 1, step=0.05,
                  description=description)

def penrose_outline_factor(divisions):
    """Outline width per unit of scale. Thinner for deeper deflations."""
    d = max(divisions, 1)
    return d ** -3 if d > 3 else d ** -5

def _generate_penrose(params):
    return [polygon.Polygon(role, points)
            for role, points in penrose.generate(params['divisions'])]

def _generate_einstein(params):
    return hat.generate(params['substitutions'],
                        include_supertiles=params['supertiles'] == 'show')

def _generate_triangular(params):
    return lattice.triangular(params['density'], params['baseAngle'],
                              params['edgeRatio'], params['diagonal'],
                              params['rotation'])

def _generate_square(params):
    return lattice.checkerboard(params['density'], params['rotation'])

def _generate_parallelogram(params):
    return lattice.parallelogram(params['density'], params['angle'],
                                 params['edgeRatio'], params['rotation'])

def _generate_hexagonal(params):
    return lattice.hexagonal(params['rings'], params['orientation'],
                             params['parity'], params['rotation'])


TILINGS = (
    TilingDefinition(
        'penrose', 'Penrose',
        'Aperiodic golden rhombi with infinite non-repetition.',
        controls=(
            Slider('divisions', 'Subdivisions', 1, 10, 7,
                   description='Higher counts add depth,'
                               ' but take longer to draw.'),
            Select('zoom', 'Framing',
                   (('in', 'Fill Canvas'), ('out', 'Show Decagon')), 'in',
                   description='Fill crops to the edges,'
                               ' show decagon leaves breathing room.'),
        ),
        color_roles=(
            ColorRole('thin', 'Thin tiles', '#cc4c4c', FILL),
            ColorRole('thick', 'Thick tiles', '#3a70b8', FILL),
            ColorRole('outline', 'Outline', '#111827', OUTLINE),
            _background(),
        ),
        generator=_generate_penrose,
        scale_multiplier=lambda p: 1.0 if p['zoom'] == 'in' else 0.5,
        outline_width=lambda scale, p: max(
            penrose_outline_factor(p['divisions']) * scale, 0.25),
    ),
    TilingDefinition(
        'einstein', 'Einstein',
        'The aperiodic hat monotile built from nested metatiles.',
        controls=(
            Slider('substitutions', 'Substitutions', 1, 5, 3,
                   description='Each level inflates the patch'
                               ' by one layer of supertiles.'),
            Select('supertiles', 'Supertiles',
                   (('hide', 'Hide'), ('show', 'Show')), 'hide',
                   description='Draw the metatile outlines'
                               ' of every level.'),
        ),
        color_roles=(
            ColorRole('hat-h', 'H hats', '#94cdeb', FILL),
            ColorRole('hat-t', 'T hats', '#fbfbfb', FILL),
            ColorRole('hat-p', 'P hats', '#fafafa', FILL),
            ColorRole('hat-f', 'F hats', '#bfbfbf', FILL),
            ColorRole('supertile-h', 'H supertiles', '#fde68a', FILL),
            ColorRole('supertile-t', 'T supertiles', '#fecaca', FILL),
            ColorRole('supertile-p', 'P supertiles', '#bbf7d0', FILL),
            ColorRole('supertile-f', 'F supertiles', '#c7d2fe', FILL),
            ColorRole('outline', 'Outline', '#1f2937', OUTLINE),
            _background(),
        ),
        generator=_generate_einstein,
        outline_width=lambda scale, p: max(scale * 0.06, 0.3),
        padding=DEFAULT_PADDING,
    ),
    TilingDefinition(
        'triangular', 'Triangular',
        'Custom triangle lattices with adjustable angles and diagonals.',
        controls=(
            Slider('density', 'Grid density', 6, 36, 14,
                   description='How many triangle pairs span the canvas.'),
            Slider('baseAngle', 'Base angle (deg)', 20, 160, 60,
                   description='Controls the angle between'
                               ' the lattice edges.'),
            _edge_ratio_control('Scales the second lattice edge'
                                ' relative to the first.'),
            Select('diagonal', 'Diagonal',
                   (('forward', 'Forward slash'), ('backward', 'Back slash')),
                   'forward',
                   description='Choose which diagonal divides'
                               ' each parallelogram.'),
            _rotation_control('Rotate the entire tiling after generation.'),
        ),
        color_roles=(
            ColorRole('up', 'Up triangles', '#f97316', FILL),
            ColorRole('down', 'Down triangles', '#0ea5e9', FILL),
            ColorRole('outline', 'Outline', '#020617', OUTLINE),
            _background(),
        ),
        generator=_generate_triangular,
        outline_width=lambda scale, p: max(scale * 0.015, 0.4),
        overscan=OVERSCAN_FACTOR,
        frame_radius=lambda p: lattice.frame_radius(
            p['density'], p['baseAngle'], p['edgeRatio']),
    ),
    TilingDefinition(
        'square', 'Square',
        'Classic checkerboard grid.',
        controls=(
            Slider('density', 'Grid density', 2, 40, 10,
                   description='Number of squares along each axis.'),
            _rotation_control('Rotate the grid after construction.'),
        ),
        color_roles=(
            ColorRole('primary', 'Light squares', '#f8fafc', FILL),
            ColorRole('secondary', 'Dark squares', '#1f2937', FILL),
            ColorRole('outline', 'Outline', '#0f172a', OUTLINE),
            _background(),
        ),
        generator=_generate_square,
        outline_width=lambda scale, p: max(scale * 0.02, 0.5),
        overscan=OVERSCAN_FACTOR,
        frame_radius=lambda p: lattice.frame_radius(p['density']),
    ),
    TilingDefinition(
        'parallelogram', 'Parallelogram',
        'Alternating parallelograms with tunable skew and edge ratios.',
        controls=(
            Slider('density', 'Grid density', 4, 40, 12,
                   description='Number of tiles along each axis.'),
            Slider('angle', 'Interior angle (deg)', 20, 160, 90,
                   description='Angle between the two lattice directions.'),
            _edge_ratio_control('Length of the second edge'
                                ' relative to the first.'),
            _rotation_control('Rotate the tiling after construction.'),
        ),
        color_roles=(
            ColorRole('primary', 'Primary tiles', '#10b981', FILL),
            ColorRole('secondary', 'Alternate tiles', '#047857', FILL),
            ColorRole('outline', 'Outline', '#0f172a', OUTLINE),
            _background(),
        ),
        generator=_generate_parallelogram,
        outline_width=lambda scale, p: max(scale * 0.02, 0.5),
        overscan=OVERSCAN_FACTOR,
        frame_radius=lambda p: lattice.frame_radius(
            p['density'], p['angle'], p['edgeRatio']),
    ),
    TilingDefinition(
        'hexagonal', 'Hexagonal',
        'Honeycomb tessellation with optional alternate coloring.',
        controls=(
            Slider('rings', 'Radius rings', 2, 8, 4,
                   description='Number of hexagon rings around the center.'),
            Select('orientation', 'Orientation',
                   (('pointy', 'Pointy top'), ('flat', 'Flat top')),
                   'pointy'),
            Select('parity', 'Coloring',
                   (('alternate', 'Alternate parity'),
                    ('solid', 'Single color')), 'alternate'),
            _rotation_control('Rotate the honeycomb about its center cell.'),
        ),
        color_roles=(
            ColorRole('primary', 'Primary hexes', '#6366f1', FILL),
            ColorRole('secondary', 'Alternate hexes', '#a855f7', FILL),
            ColorRole('outline', 'Outline', '#1e1b4b', OUTLINE),
            _background(),
        ),
        generator=_generate_hexagonal,
        outline_width=lambda scale, p: max(scale * 0.02, 0.45),
        overscan=OVERSCAN_FACTOR,
        frame_radius=lambda p: lattice.hex_frame_radius(p['rings']),
    ),
)

TILINGS_BY_ID = dict((tiling.id, tiling) for tiling in TILINGS)


def get_tiling(tiling_id):
    """Look up a tiling definition.

    Raises:
        KeyError: if there is no tiling with that id.
    """
    try:
        return TILINGS_BY_ID[tiling_id]
    except KeyError:
        raise KeyError('Unknown tiling: %r' % (tiling_id,))

def tiling_ids():
    """Registered tiling ids in display order."""
    return [tiling.id for tiling in TILINGS]
