"""Geometry model, GeoJSON codec and enums for the design rule engine."""

from texel.models.enums import ObjectKind, RuleKind
from texel.models.geojson import (
    GeoJsonDecodeError,
    dump_feature_collection,
    parse_feature_collection,
)
from texel.models.geometry import (
    Bound,
    Coordinate,
    Feature,
    FeatureCollection,
    Geometry,
    OtherGeometry,
    Polygon,
    Ring,
)

__all__ = [
    "Bound",
    "Coordinate",
    "Feature",
    "FeatureCollection",
    "Geometry",
    "OtherGeometry",
    "Polygon",
    "Ring",
    "RuleKind",
    "ObjectKind",
    "GeoJsonDecodeError",
    "parse_feature_collection",
    "dump_feature_collection",
]
