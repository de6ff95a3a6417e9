#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Penrose rhombus tiling by recursive deflation of Robinson triangles.

The seed is a decagonal star of `2 * base` thin triangles fanned around
the origin. Each deflation splits every thin triangle into one thin and
one thick triangle and every thick triangle into two thick and one thin
triangle using golden ratio cut points. Adjacent triangle pairs form the
familiar thin and thick rhombi but they are never merged.

See:
    http://preshing.com/20110831/penrose-tiling-explained/
"""
import math
import logging

from . import const

from .point import P

logger = logging.getLogger(__name__)

THIN = 'thin'
THICK = 'thick'

DEFAULT_BASE = 5


def seed_triangles(base=DEFAULT_BASE):
    """The undeflated decagonal star.

    Args:
        base: Rotational symmetry order. The star has `2 * base` wedges.

    Returns:
        A list of (role, (v1, v2, v3)) triangles.
    """
    triangles = []
    step = math.pi / base
    origin = P(0.0, 0.0)
    for i in range(2 * base):
        v2 = P.from_polar(1.0, (2 * i - 1) * step / 2)
        v3 = P.from_polar(1.0, (2 * i + 1) * step / 2)
        if i % 2 == 0:
            # Mirror every other wedge so adjacent edges match
            v2, v3 = v3, v2
        triangles.append((THIN, (origin, v2, v3)))
    return triangles

def deflate(triangles):
    """Apply one deflation step to a list of (role, (v1, v2, v3)) triangles.

    Vertex order of the new triangles follows the substitution rule
    exactly since the outline stroke direction depends on it.
    """
    result = []
    for role, (v1, v2, v3) in triangles:
        if role == THIN:
            p1 = v1 + (v2 - v1) / const.PHI
            result.append((THIN, (v3, p1, v2)))
            result.append((THICK, (p1, v3, v1)))
        else:
            p2 = v2 + (v1 - v2) / const.PHI
            p3 = v2 + (v3 - v2) / const.PHI
            result.append((THICK, (p3, v3, v1)))
            result.append((THICK, (p2, p3, v2)))
            result.append((THIN, (p3, p2, v1)))
    return result

def generate(divisions, base=DEFAULT_BASE):
    """Generate a Penrose triangle tiling.

    Args:
        divisions: Number of deflation steps. Zero returns the seed.
        base: Rotational symmetry order of the seed.

    Returns:
        A list of (role, (v1, v2, v3)) triangles in unit scale,
        centered on the origin.
    """
    triangles = seed_triangles(base)
    for _ in range(max(0, int(divisions))):
        triangles = deflate(triangles)
    logger.debug('penrose: base=%d, divisions=%d, triangles=%d',
                 base, divisions, len(triangles))
    return triangles

def triangle_counts(divisions, base=DEFAULT_BASE):
    """Thin and thick triangle counts after `divisions` deflations.

    Returns:
        A tuple (thin, thick).
    """
    thin = 2 * base
    thick = 0
    for _ in range(max(0, int(divisions))):
        thin, thick = thin + thick, thin + 2 * thick
    return thin, thick
