#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
2D affine transform matrices.

A matrix is a 2x3 nested tuple ``((a, b, c), (d, e, f))`` mapping the
point (x, y) to (a*x + b*y + c, d*x + e*y + f). The missing third row is
always (0, 0, 1).

Matrices compose right to left: ``compose_transform(m1, m2)`` applies
`m2` first, then `m1`.
"""
import math


#: Determinant tolerance relative to the squared largest coefficient
SINGULAR_TOLERANCE = 1e-12

#: The transform that leaves every point where it is.
IDENTITY_MATRIX = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))

def is_identity_transform(m):
    """True if `m` is exactly the identity matrix."""
    return (tuple(m[0]) == IDENTITY_MATRIX[0]
            and tuple(m[1]) == IDENTITY_MATRIX[1])

def compose_transform(m1, m2):
    """The matrix product ``m1 x m2``, i.e. `m2` followed by `m1`."""
    (a1, b1, c1), (d1, e1, f1) = m1
    (a2, b2, c2), (d2, e2, f2) = m2
    return ((a1 * a2 + b1 * d2, a1 * b2 + b1 * e2, a1 * c2 + b1 * f2 + c1),
            (d1 * a2 + e1 * d2, d1 * b2 + e1 * e2, d1 * c2 + e1 * f2 + f1))

def matrix_translate(x, y):
    """A translation by (x, y)."""
    return ((1.0, 0.0, x), (0.0, 1.0, y))

def matrix_rotate(angle, origin=None):
    """A counter-clockwise rotation.

    Args:
        angle: Rotation angle in radians.
        origin: Center of rotation. Default is (0, 0).
    """
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    m = ((cos_a, -sin_a, 0.0), (sin_a, cos_a, 0.0))
    if origin is not None:
        # translate(origin) x rotate x translate(-origin)
        m = compose_transform(matrix_translate(origin[0], origin[1]),
                              compose_transform(m, matrix_translate(
                                  -origin[0], -origin[1])))
    return m

def matrix_scale_translate(scale_x, scale_y, offset_x, offset_y):
    """Scale about the origin, then translate by the offsets."""
    return ((scale_x, 0.0, offset_x), (0.0, scale_y, offset_y))

def matrix_determinant(m):
    """Determinant of the linear (2x2) part of `m`.

    It is negative for transforms that mirror.
    """
    return m[0][0] * m[1][1] - m[0][1] * m[1][0]

def matrix_invert(m):
    """The inverse transform of `m`.

    The singular test is relative to the size of the matrix
    coefficients, so small but well conditioned transforms still invert.

    Raises:
        ValueError: if `m` is singular and has no inverse.
    """
    det = matrix_determinant(m)
    (a, b, c), (d, e, f) = m
    norm = max(abs(a), abs(b), abs(d), abs(e))
    if det == 0 or abs(det) <= SINGULAR_TOLERANCE * norm * norm:
        raise ValueError('Singular transform matrix: %r' % (m,))
    return ((e / det, -b / det, (b * f - c * e) / det),
            (-d / det, a / det, (c * d - a * f) / det))

def matrix_match_segment(p, q):
    """The similarity that carries (0, 0)->(1, 0) onto `p`->`q`."""
    dx = q[0] - p[0]
    dy = q[1] - p[1]
    return ((dx, -dy, p[0]), (dy, dx, p[1]))

def matrix_match_segments(p1, q1, p2, q2):
    """The similarity that carries segment `p1`->`q1` onto `p2`->`q2`.

    The source segment is first mapped back onto the unit segment,
    then out onto the target.

    Raises:
        ValueError: if the source segment has zero length.
    """
    return compose_transform(matrix_match_segment(p2, q2),
                             matrix_invert(matrix_match_segment(p1, q1)))

def matrix_apply_to_point(matrix, p):
    """The (x, y) tuple of `p` mapped through `matrix`."""
    (a, b, c), (d, e, f) = matrix
    x, y = p[0], p[1]
    return (a * x + b * y + c, d * x + e * y + f)
