#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Fit-to-canvas projection.

Maps polygons in local tiling units onto a pixel rectangle with a single
isotropic scale and a translation.

There are two framings. The default fits the polygons' bounding box
inside the canvas and centers it. Periodic tilings instead give a
*frame radius*: the radius of a circle about the local origin that is
known to be completely tiled. The canvas is then fit inside that
circle, so the corners stay covered whatever the rotation and aspect
ratio.
"""
import math
import logging
import collections

from .geom import box
from .geom import polygon
from .geom import transform2d

logger = logging.getLogger(__name__)

Projection = collections.namedtuple('Projection', ('polygons', 'scale'))


def projection_matrix(bounds, width, height, scale_multiplier=1.0,
                      padding=0.0, overscan=1.0):
    """The transform that fits a bounding box into a pixel rectangle.

    Args:
        bounds: A :class:`box.Box` in local units.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        scale_multiplier: Applied after fitting.
        padding: Pixels kept clear on every side.
        overscan: Multiplicative scale growth.

    Returns:
        A tuple (matrix, scale).
    """
    world_width = bounds.width() or 1.0
    world_height = bounds.height() or 1.0
    inner_width = max(width - padding * 2, 1)
    inner_height = max(height - padding * 2, 1)
    scale = (min(inner_width / world_width, inner_height / world_height)
             * scale_multiplier * overscan)
    center = bounds.center
    offset_x = width / 2 - center.x * scale
    offset_y = height / 2 - center.y * scale
    return (transform2d.matrix_scale_translate(scale, scale,
                                               offset_x, offset_y), scale)

def cover_matrix(radius, width, height, scale_multiplier=1.0, overscan=1.0):
    """The transform that puts a pixel rectangle inside a circle.

    The circle of `radius` local units about the origin is mapped onto
    the canvas center with the canvas half diagonal as its radius.
    With a combined multiplier of at least one the canvas lies entirely
    inside the circle.

    Returns:
        A tuple (matrix, scale).
    """
    half_diagonal = math.hypot(width, height) / 2
    scale = half_diagonal / (radius or 1.0) * scale_multiplier * overscan
    return (transform2d.matrix_scale_translate(scale, scale,
                                               width / 2, height / 2), scale)

def project_polygons(polygons, width, height, scale_multiplier=1.0,
                     padding=0.0, overscan=1.0, frame_radius=None):
    """Fit polygons to a pixel rectangle.

    A zero or negative canvas size yields an empty projection with
    unit scale.

    Args:
        frame_radius: If not None, frame the canvas inside the circle
            of this radius about the origin instead of fitting the
            bounding box. `padding` is ignored.

    Returns:
        A :class:`Projection` of the transformed polygons and the scale.
    """
    if width <= 0 or height <= 0:
        return Projection([], 1.0)
    polygons = list(polygons)
    if frame_radius is not None:
        matrix, scale = cover_matrix(frame_radius, width, height,
                                     scale_multiplier, overscan)
        logger.debug('projection: %dx%d, frame radius=%f, scale=%f',
                     width, height, frame_radius, scale)
    else:
        bounds = box.Box.from_polygons(polygons)
        matrix, scale = projection_matrix(bounds, width, height,
                                          scale_multiplier, padding, overscan)
        logger.debug('projection: %dx%d, bounds=%r, scale=%f',
                     width, height, bounds, scale)
    return Projection(polygon.transform_polygons(polygons, matrix), scale)

def project_tiling(tiling, polygons, width, height, options=None):
    """Project polygons using a tiling definition's framing policy."""
    return project_polygons(polygons, width, height,
                            scale_multiplier=tiling.scale_multiplier(options),
                            padding=tiling.padding,
                            overscan=tiling.overscan,
                            frame_radius=tiling.frame_radius(options))
