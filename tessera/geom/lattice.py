#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Periodic tilings: triangle and parallelogram lattices, square
checkerboards and hexagonal rings.

The requested density fixes a *frame radius*. The square inscribed in
the frame circle has the area of `density` by `density` lattice cells,
so about that many cells show on a square canvas framed inside the
circle. The circle is rotation invariant and centered on the origin,
so such a canvas stays covered at any rotation. With `cover` set,
generators emit every cell needed to tile the whole circle, plus
`margin` more cells (or rings) as overscan.

Rotation is applied last, about the origin.
"""
import math
import logging

from . import polygon

from .point import P

logger = logging.getLogger(__name__)

# Extra lattice cells generated beyond the covered circle
OVERSCAN_CELLS = 1

FORWARD = 'forward'
BACKWARD = 'backward'
POINTY = 'pointy'
FLAT = 'flat'
ALTERNATE = 'alternate'
SOLID = 'solid'

_SQRT3 = math.sqrt(3)


def cell_count(density):
    """Lattice cells per axis. Never less than one."""
    return max(1, int(round(density)))

def lattice_vectors(angle, edge_ratio):
    """Basis vectors of a skewed lattice.

    Args:
        angle: Interior angle between the basis vectors in degrees.
        edge_ratio: Length of the second vector relative to the first.
    """
    a = math.radians(angle)
    return P(1.0, 0.0), P.from_polar(edge_ratio, a)

def _cell_radius(va, vb):
    # Half the longer diagonal of one cell
    return max((va + vb).length(), (va - vb).length()) / 2

def frame_radius(density, angle=90, edge_ratio=1.0):
    """Radius of the frame circle for a lattice density.

    For a square lattice the frame circle circumscribes the
    `density` by `density` block of cells.
    """
    va, vb = lattice_vectors(angle, edge_ratio)
    return cell_count(density) * math.sqrt(abs(va.cross(vb)) / 2)

def _cells(density, va, vb, cover, margin):
    """Yield (i, j, origin) for every lattice cell to emit.

    Cell (0, 0) is the lower left corner cell of the window, the
    `density` by `density` block of cells centered on the origin.
    """
    cells = cell_count(density)
    shift = (va + vb) * (cells / 2.0)
    extra_a = extra_b = 0
    keep = None
    if cover:
        area = abs(va.cross(vb))
        radius = cells * math.sqrt(area / 2)
        # Lattice coefficient range of every point in the circle
        extra_a = max(0, int(math.ceil(
            radius * vb.length() / area - cells / 2.0)))
        extra_b = max(0, int(math.ceil(
            radius * va.length() / area - cells / 2.0)))
        keep = (radius + margin * max(va.length(), vb.length())
                + _cell_radius(va, vb))
    for j in range(-extra_b - margin, cells + extra_b + margin):
        for i in range(-extra_a - margin, cells + extra_a + margin):
            origin = va * i + vb * j - shift
            if keep is not None and (origin + (va + vb) / 2).length() > keep:
                continue
            yield i, j, origin

def _finish(polygons, rotation, name):
    if rotation:
        polygons = polygon.rotate_polygons(polygons, math.radians(rotation))
    logger.debug('%s: polygons=%d, rotation=%r', name, len(polygons), rotation)
    return polygons

def triangular(density, base_angle=60, edge_ratio=1.0, diagonal=FORWARD,
               rotation=0, margin=OVERSCAN_CELLS, cover=True):
    """Triangle tiling made by splitting each lattice parallelogram
    along one of its diagonals.

    Args:
        density: Window cells per axis.
        base_angle: Angle between the lattice edges in degrees.
        edge_ratio: Second edge length relative to the first.
        diagonal: 'forward' or 'backward'.
        rotation: Rotation in degrees about the origin.
        margin: Extra overscan cells on each side.
        cover: Tile the whole circle around the window.

    Returns:
        A list of :class:`polygon.Polygon` tagged 'up' or 'down'.
    """
    va, vb = lattice_vectors(base_angle, edge_ratio)
    polygons = []
    for dummy_i, dummy_j, p0 in _cells(density, va, vb, cover, margin):
        p1 = p0 + va
        p2 = p0 + vb
        p3 = p1 + vb
        if diagonal == BACKWARD:
            polygons.append(polygon.Polygon('up', (p0, p2, p3)))
            polygons.append(polygon.Polygon('down', (p0, p1, p2)))
        else:
            polygons.append(polygon.Polygon('up', (p0, p1, p3)))
            polygons.append(polygon.Polygon('down', (p0, p3, p2)))
    return _finish(polygons, rotation, 'triangular')

def parallelogram(density, angle=90, edge_ratio=1.0, rotation=0,
                  margin=OVERSCAN_CELLS, cover=True):
    """Parallelogram tiling colored by cell parity.

    Returns:
        A list of :class:`polygon.Polygon` tagged 'primary' or 'secondary'.
    """
    va, vb = lattice_vectors(angle, edge_ratio)
    polygons = []
    for i, j, p0 in _cells(density, va, vb, cover, margin):
        p1 = p0 + va
        role = 'primary' if (i + j) % 2 == 0 else 'secondary'
        polygons.append(polygon.Polygon(role, (p0, p1, p1 + vb, p0 + vb)))
    return _finish(polygons, rotation, 'parallelogram')

def checkerboard(density, rotation=0, margin=OVERSCAN_CELLS, cover=True):
    """Unit square checkerboard.

    Returns:
        A list of :class:`polygon.Polygon` tagged 'primary' or 'secondary'.
    """
    polygons = parallelogram(density, 90, 1.0, 0, margin, cover)
    return _finish(polygons, rotation, 'square')

def hex_center(q, r, orientation=POINTY):
    """Center of the unit hexagon at axial coordinates (q, r)."""
    if orientation == POINTY:
        return P(_SQRT3 * q + _SQRT3 / 2 * r, 1.5 * r)
    return P(1.5 * q, _SQRT3 * r + _SQRT3 / 2 * q)

def hexagon(center, orientation=POINTY):
    """Vertices of a unit radius hexagon."""
    offset = -30 if orientation == POINTY else 0
    return [center + P.from_polar(1.0, math.radians(60 * i + offset))
            for i in range(6)]

def hex_coords(rings):
    """Axial coordinates of every cell within `rings` of the origin."""
    for q in range(-rings, rings + 1):
        for r in range(max(-rings, -q - rings), min(rings, -q + rings) + 1):
            yield q, r

def hex_frame_radius(rings):
    """Radius of the largest circle tiled by `rings` rings.

    It is the distance to the notches between the outermost cells
    along the flat sides of the patch.
    """
    return 1.5 * max(0, int(round(rings))) + 0.5

def hexagonal(rings, orientation=POINTY, parity=ALTERNATE, rotation=0,
              margin=OVERSCAN_CELLS):
    """Hexagonal tiling out to a ring radius.

    Args:
        rings: Ring radius. Zero is a single hexagon.
        orientation: 'pointy' or 'flat' topped hexagons.
        parity: 'alternate' colors cells by axial parity,
            'solid' uses the primary role only.
        rotation: Rotation in degrees about the center cell.
        margin: Extra overscan rings.

    Returns:
        A list of :class:`polygon.Polygon` tagged 'primary' or 'secondary'.
    """
    radius = max(0, int(round(rings))) + margin
    polygons = []
    for q, r in hex_coords(radius):
        if parity == ALTERNATE and (q + r) % 2 != 0:
            role = 'secondary'
        else:
            role = 'primary'
        polygons.append(polygon.Polygon(
            role, hexagon(hex_center(q, r, orientation), orientation)))
    return _finish(polygons, rotation, 'hexagonal')

def hex_cell_count(rings):
    """Number of cells within a ring radius."""
    return 3 * rings * rings + 3 * rings + 1
