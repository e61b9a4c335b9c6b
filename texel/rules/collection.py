"""Design rules over a single feature collection.

Each rule returns True when the collection passes. Rules that need ring data
skip non-polygon features; surfacing those is the job of the NotPolygon rule.
"""

from texel.models.enums import RuleKind
from texel.models.geometry import FeatureCollection
from texel.rules.registry import CollectionPredicate
from texel.spatial.predicates import polygon_overlaps, ring_closed


def check_polygons_only(collection: FeatureCollection) -> bool:
    """NotPolygon: every feature geometry must be a Polygon."""
    return all(feature.is_polygon for feature in collection)


def check_rings_closed(collection: FeatureCollection) -> bool:
    """NotClosed: every ring of every polygon must end where it starts."""
    return all(ring_closed(ring) for polygon in collection.polygons() for ring in polygon.rings)


def check_no_overlaps(collection: FeatureCollection) -> bool:
    """Overlapped: no two polygons in the collection may overlap.

    Every pair is tested once; the scan stops at the first overlapping pair.
    """
    polygons = list(collection.polygons())
    for i, a in enumerate(polygons):
        for b in polygons[i + 1 :]:
            if polygon_overlaps(a, b):
                return False
    return True


COLLECTION_RULES: dict[RuleKind, CollectionPredicate] = {
    RuleKind.NOT_POLYGON: check_polygons_only,
    RuleKind.NOT_CLOSED: check_rings_closed,
    RuleKind.OVERLAPPED: check_no_overlaps,
}
