#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
2D geometry package and tiling generators.
"""
# Expose package-wide constants and functions
from .const import TAU, PHI, set_epsilon, is_zero, float_eq

# Expose some basic geometric classes at package level
from .point import P
from .line import Line
from .box import Box
from .polygon import Polygon
