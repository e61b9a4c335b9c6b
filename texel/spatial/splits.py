"""Split building limits: building limits cut into pieces by height plateaus."""

import logging

import shapely
from shapely.validation import make_valid

from texel.models.geometry import Feature, FeatureCollection, Polygon
from texel.spatial.utils import from_shapely, polygon_parts, to_shapely

logger = logging.getLogger(__name__)


def _polygonal_area(polygon: Polygon) -> shapely.Geometry | None:
    """Repair a polygon and keep only its areal part.

    ``make_valid`` may return a collection mixing polygons and collapsed
    lines; overlay operations need a purely polygonal input.
    """
    shape = to_shapely(polygon)
    if shape is None:
        return None

    parts = polygon_parts(make_valid(shape))
    if not parts:
        return None
    return shapely.union_all(parts)


def split_building_limits(
    building_limits: FeatureCollection,
    height_plateaus: FeatureCollection,
) -> FeatureCollection:
    """Intersect every building limit with every height plateau.

    Each non-empty polygonal piece becomes a Polygon feature carrying the
    properties of the plateau it was cut from (e.g. its elevation).
    Non-polygon features and polygons that cannot bound an area are skipped.

    Args:
        building_limits: Building limit polygons
        height_plateaus: Height plateau polygons

    Returns:
        FeatureCollection of split pieces, ordered by building limit then plateau
    """
    plateaus = []
    for feature in height_plateaus:
        if not feature.is_polygon:
            continue
        area = _polygonal_area(feature.geometry)
        if area is not None:
            plateaus.append((feature, area))

    pieces: list[Feature] = []
    for feature in building_limits:
        if not feature.is_polygon:
            continue
        limit = _polygonal_area(feature.geometry)
        if limit is None:
            continue

        for plateau, plateau_area in plateaus:
            for part in polygon_parts(limit.intersection(plateau_area)):
                if part.area <= 0:
                    continue
                pieces.append(
                    Feature(
                        geometry=from_shapely(part),
                        properties=dict(plateau.properties or {}),
                    )
                )

    logger.debug(
        f"Split {len(building_limits)} building limits by {len(plateaus)} plateaus "
        f"into {len(pieces)} pieces"
    )
    return FeatureCollection(features=tuple(pieces))
