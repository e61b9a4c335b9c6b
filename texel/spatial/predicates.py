"""Planar geometry predicates used by the design rules.

All predicates are pure and total over any structurally valid polygon,
including empty and degenerate ones. A polygon whose outer ring cannot bound
an area contains no point and clips to nothing.

The overlap test samples a single vertex of each polygon and uses a
bounding-box clip as the third signal. It is an approximation with known false
negatives, kept because existing projects were validated with it.
"""

import shapely

from texel.models.geometry import Bound, Coordinate, Polygon, Ring
from texel.spatial.utils import from_shapely, polygon_parts, to_shapely


def ring_closed(ring: Ring) -> bool:
    """Check that the first and last coordinate of a ring are identical.

    Exact comparison, no tolerance. An empty ring is not closed.
    """
    return len(ring) > 0 and ring[0] == ring[-1]


def bound(polygon: Polygon) -> Bound | None:
    """Bounding rectangle of the polygon's outer ring.

    Returns:
        Bound, or None if the polygon has no outer ring coordinates
    """
    exterior = polygon.exterior
    if not exterior:
        return None

    xs = [x for x, _ in exterior]
    ys = [y for _, y in exterior]
    return Bound(min_x=min(xs), min_y=min(ys), max_x=max(xs), max_y=max(ys))


def point_in_polygon(polygon: Polygon, point: Coordinate) -> bool:
    """Planar point-in-polygon test against the outer ring.

    Holes are not excluded. Points on the boundary count as inside.
    """
    shape = to_shapely(polygon, holes=False)
    if shape is None:
        return False
    return bool(shapely.intersects_xy(shape, point[0], point[1]))


def clip(polygon: Polygon, rect: Bound) -> list[Ring]:
    """Intersect a polygon with an axis-aligned rectangle.

    Uses GEOS rectangle clipping, which is fast and tolerates invalid input but
    may return invalid output. Good enough as an overlap signal, not as an
    exact polygon intersection.

    Returns:
        Rings of the clipped region (outer rings followed by their holes);
        empty if nothing of the polygon falls inside the rectangle
    """
    shape = to_shapely(polygon)
    if shape is None:
        return []

    clipped = shapely.clip_by_rect(shape, rect.min_x, rect.min_y, rect.max_x, rect.max_y)

    rings: list[Ring] = []
    for part in polygon_parts(clipped):
        rings.extend(from_shapely(part).rings)
    return rings


def polygon_overlaps(a: Polygon, b: Polygon) -> bool:
    """Decide whether two polygons overlap.

    True if any of:
    - clipping ``a`` against the bound of ``b`` leaves a non-empty region
    - the first vertex of ``b`` lies inside ``a``
    - the first vertex of ``a`` lies inside ``b``
    """
    b_bound = bound(b)
    if b_bound is not None and clip(a, b_bound):
        return True

    b_vertex = b.first_vertex
    if b_vertex is not None and point_in_polygon(a, b_vertex):
        return True

    a_vertex = a.first_vertex
    return a_vertex is not None and point_in_polygon(b, a_vertex)
