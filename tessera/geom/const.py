#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Package-wide numeric constants and float tolerance.

``EPSILON`` is the distance under which two coordinates are treated as
the same. Generators work in small local units (the Penrose seed has
unit radius, a hat edge has unit length) so the default of 1e-06 is
comfortably below any real feature size. Change it with
:func:`set_epsilon` before generating anything.
"""
import math

#: Full turn in radians.
TAU = math.pi * 2

#: The golden ratio.
PHI = (1 + math.sqrt(5)) / 2

#: Tolerance for approximate float comparison.
EPSILON = 1e-06


def set_epsilon(value):
    """Replace the package-wide comparison tolerance.

    Args:
        value: A small positive float.

    Raises:
        ValueError: if `value` is not positive.
    """
    #pylint: disable=global-statement
    global EPSILON
    value = float(value)
    if value <= 0:
        raise ValueError('Tolerance must be positive: %r' % value)
    EPSILON = value


def float_eq(value1, value2):
    """True if the two floats differ by less than EPSILON."""
    return abs(value1 - value2) < EPSILON


def is_zero(value):
    """Shorthand for ``float_eq(value, 0.0)``."""
    return -EPSILON < value < EPSILON
