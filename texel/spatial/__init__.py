"""Spatial operations for design rule checks.

This package provides:
- Geometry predicates (ring closure, bound, point-in-polygon, clip, overlap)
- Split building limits (building limits cut by height plateaus)
- Conversions between the geometry model and shapely
"""

from texel.spatial.predicates import (
    bound,
    clip,
    point_in_polygon,
    polygon_overlaps,
    ring_closed,
)
from texel.spatial.splits import split_building_limits
from texel.spatial.utils import from_shapely, to_shapely

__all__ = [
    "ring_closed",
    "bound",
    "point_in_polygon",
    "clip",
    "polygon_overlaps",
    "split_building_limits",
    "to_shapely",
    "from_shapely",
]
