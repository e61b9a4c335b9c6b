"""GeoJSON (RFC 7946) FeatureCollection decoding and encoding.

Decoding is the structural gate in front of the design rule engine: anything
that does not follow the FeatureCollection grammar is rejected here with a
``GeoJsonDecodeError``, so the rules only ever see well-formed collections.
"""

from typing import Annotated, Any, Literal

from pydantic import (
    AllowInfNan,
    BaseModel,
    ConfigDict,
    Field,
    Strict,
    ValidationError,
    field_validator,
    model_validator,
)

from texel.models.geometry import Feature, FeatureCollection, Geometry, OtherGeometry, Polygon

GEOMETRY_TYPES = frozenset(
    {
        "Point",
        "MultiPoint",
        "LineString",
        "MultiLineString",
        "Polygon",
        "MultiPolygon",
        "GeometryCollection",
    }
)

Ordinate = Annotated[float, Strict(), AllowInfNan(False)]
Position = Annotated[list[Ordinate], Field(min_length=2)]


class GeoJsonDecodeError(ValueError):
    """Raised when a document is not a well-formed GeoJSON FeatureCollection."""


class PolygonSchema(BaseModel):
    """Polygon geometry: a list of rings, each a list of positions."""

    model_config = ConfigDict(extra="allow")

    type: Literal["Polygon"]
    coordinates: list[list[Position]]


class OtherGeometrySchema(BaseModel):
    """Any standard non-polygon geometry. Its coordinates are not inspected."""

    model_config = ConfigDict(extra="allow")

    type: str
    coordinates: list[Any] | None = None
    geometries: list[dict[str, Any]] | None = None

    @field_validator("type")
    @classmethod
    def must_be_non_polygon_geometry(cls, v: str) -> str:
        if v not in GEOMETRY_TYPES:
            msg = f"Unknown geometry type: {v}"
            raise ValueError(msg)
        if v == "Polygon":
            msg = "Polygon coordinates must be a list of rings of [x, y] positions"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def must_carry_members(self) -> "OtherGeometrySchema":
        if self.type == "GeometryCollection":
            if self.geometries is None:
                msg = "GeometryCollection requires a 'geometries' member"
                raise ValueError(msg)
        elif self.coordinates is None:
            msg = f"{self.type} requires a 'coordinates' member"
            raise ValueError(msg)
        return self


class FeatureSchema(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["Feature"]
    id: str | int | float | None = None
    geometry: PolygonSchema | OtherGeometrySchema | None = Field(union_mode="left_to_right")
    properties: dict[str, Any] | None = None


class FeatureCollectionSchema(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["FeatureCollection"]
    features: list[FeatureSchema]


def _to_geometry(schema: PolygonSchema | OtherGeometrySchema | None) -> Geometry:
    if schema is None:
        return OtherGeometry(type=None)
    if isinstance(schema, PolygonSchema):
        # Extra ordinates (altitude) are dropped, the engine is planar
        rings = tuple(
            tuple((position[0], position[1]) for position in ring) for ring in schema.coordinates
        )
        return Polygon(rings=rings)
    return OtherGeometry(
        type=schema.type,
        payload=schema.model_dump(mode="json", exclude_none=True),
    )


def parse_feature_collection(document: str | bytes | dict[str, Any]) -> FeatureCollection:
    """Decode a GeoJSON FeatureCollection into the geometry model.

    Args:
        document: Raw JSON text/bytes, or an already decoded JSON object

    Returns:
        FeatureCollection with one Feature per GeoJSON feature, in document order

    Raises:
        GeoJsonDecodeError: If the document is not valid JSON or does not follow
            the FeatureCollection grammar
    """
    try:
        if isinstance(document, dict):
            schema = FeatureCollectionSchema.model_validate(document)
        else:
            schema = FeatureCollectionSchema.model_validate_json(document)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'document'}: {error['msg']}"
            for error in e.errors()
        )
        msg = f"Invalid GeoJSON FeatureCollection: {errors}"
        raise GeoJsonDecodeError(msg) from e

    return FeatureCollection(
        features=tuple(
            Feature(
                geometry=_to_geometry(feature.geometry),
                properties=feature.properties,
                id=feature.id,
            )
            for feature in schema.features
        )
    )


def dump_geometry(geometry: Geometry) -> dict[str, Any] | None:
    if isinstance(geometry, Polygon):
        return {
            "type": Polygon.type,
            "coordinates": [[list(coordinate) for coordinate in ring] for ring in geometry.rings],
        }
    return geometry.payload


def dump_feature_collection(collection: FeatureCollection) -> dict[str, Any]:
    """Encode a FeatureCollection as a GeoJSON object."""
    features = []
    for feature in collection:
        encoded: dict[str, Any] = {
            "type": "Feature",
            "geometry": dump_geometry(feature.geometry),
            "properties": feature.properties,
        }
        if feature.id is not None:
            encoded["id"] = feature.id
        features.append(encoded)

    return {"type": "FeatureCollection", "features": features}
