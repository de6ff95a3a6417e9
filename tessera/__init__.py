#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Planar tiling generators and renderers.

Aperiodic (Penrose, hat monotile) and periodic (triangular, square,
parallelogram, hexagonal) tilings are generated as lists of tagged
polygons, fit to a canvas and painted with Pillow or written as SVG.
"""
__version__ = '0.3'

from .tilings import TILINGS, TILINGS_BY_ID, TilingDefinition, get_tiling
