"""Design rules over an ordered pair of feature collections.

The first collection is the dependent layer (e.g. height plateaus), the
second the reference layer it must stay consistent with (e.g. building
limits).
"""

from texel.models.enums import RuleKind
from texel.models.geometry import FeatureCollection
from texel.rules.registry import SplitPredicate
from texel.spatial.predicates import bound, point_in_polygon


def check_within_bounds(dependent: FeatureCollection, reference: FeatureCollection) -> bool:
    """OutOfBound: every dependent polygon must lie inside some reference polygon.

    A dependent polygon is in bound when one reference polygon contains both
    the minimum and the maximum corner of its bounding rectangle. Non-polygon
    features and polygons without coordinates are skipped.
    """
    references = list(reference.polygons())

    for polygon in dependent.polygons():
        polygon_bound = bound(polygon)
        if polygon_bound is None:
            continue

        in_bound = any(
            point_in_polygon(limit, polygon_bound.min)
            and point_in_polygon(limit, polygon_bound.max)
            for limit in references
        )
        if not in_bound:
            return False

    return True


SPLIT_RULES: dict[RuleKind, SplitPredicate] = {
    RuleKind.OUT_OF_BOUND: check_within_bounds,
}
