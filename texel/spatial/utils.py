"""Conversions between the rule engine's geometry model and shapely.

Submitted rings are not guaranteed to be closed or long enough to bound an
area, so conversion is lenient: shapely closes open rings itself, and rings
that cannot form a linear ring at all are dropped (or, for the outer ring,
make the whole polygon unrepresentable).
"""

import shapely
from shapely.geometry import GeometryCollection, MultiPolygon
from shapely.geometry import Polygon as ShapelyPolygon

from texel.models.geometry import Polygon, Ring

# A linear ring needs at least four positions once closed
MIN_LINEAR_RING_POSITIONS = 4


def forms_linear_ring(ring: Ring) -> bool:
    """Check whether a ring has enough positions to become a shapely LinearRing."""
    if not ring:
        return False
    closed = ring[0] == ring[-1]
    positions = len(ring) if closed else len(ring) + 1
    return positions >= MIN_LINEAR_RING_POSITIONS


def to_shapely(polygon: Polygon, *, holes: bool = True) -> ShapelyPolygon | None:
    """Convert a Polygon into a shapely Polygon.

    Args:
        polygon: Polygon from a feature collection
        holes: Include interior rings (default: True)

    Returns:
        shapely Polygon, or None when the outer ring cannot bound an area
    """
    if not forms_linear_ring(polygon.exterior):
        return None

    interiors = [ring for ring in polygon.holes if forms_linear_ring(ring)] if holes else []
    return ShapelyPolygon(polygon.exterior, interiors)


def from_shapely(shape: ShapelyPolygon) -> Polygon:
    """Convert a shapely Polygon back into a Polygon with closed 2D rings."""
    rings = [shape.exterior, *shape.interiors]
    return Polygon(rings=tuple(tuple((x, y) for x, y, *_ in ring.coords) for ring in rings))


def polygon_parts(geometry: shapely.Geometry) -> list[ShapelyPolygon]:
    """Return the non-empty polygons of any shapely geometry.

    Lines and points produced by clipping or intersection are discarded.
    Nested collections are flattened.
    """
    parts = []
    for part in shapely.get_parts(geometry):
        if isinstance(part, ShapelyPolygon):
            if not part.is_empty:
                parts.append(part)
        elif isinstance(part, (MultiPolygon, GeometryCollection)):
            parts.extend(polygon_parts(part))
    return parts
