"""Planar geometry model used by the design rules.

A feature's geometry is a tagged variant: either a ``Polygon`` carrying ring
data, or an ``OtherGeometry`` that only remembers its GeoJSON type (and the
raw object so it can be written back unchanged). Rules that care about
polygons match on the variant and skip everything else.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, ClassVar

Coordinate = tuple[float, float]
Ring = tuple[Coordinate, ...]


@dataclass(frozen=True)
class Bound:
    """Axis-aligned bounding rectangle."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def min(self) -> Coordinate:
        return (self.min_x, self.min_y)

    @property
    def max(self) -> Coordinate:
        return (self.max_x, self.max_y)


@dataclass(frozen=True)
class Polygon:
    """Polygon made of rings: the first ring is the outer boundary, the rest are holes.

    Rings are stored exactly as submitted. Closure is a design rule, so an
    unclosed ring is a legal value here.
    """

    type: ClassVar[str] = "Polygon"

    rings: tuple[Ring, ...] = ()

    @property
    def exterior(self) -> Ring:
        return self.rings[0] if self.rings else ()

    @property
    def holes(self) -> tuple[Ring, ...]:
        return self.rings[1:]

    @property
    def first_vertex(self) -> Coordinate | None:
        """First coordinate of the outer ring, or None for an empty polygon."""
        exterior = self.exterior
        return exterior[0] if exterior else None


@dataclass(frozen=True)
class OtherGeometry:
    """Any geometry that is not a Polygon.

    Attributes:
        type: GeoJSON geometry type string (None for a null geometry)
        payload: The decoded GeoJSON geometry object, kept for round-tripping
    """

    type: str | None
    payload: dict[str, Any] | None = field(default=None, compare=False)


Geometry = Polygon | OtherGeometry


@dataclass(frozen=True)
class Feature:
    geometry: Geometry
    properties: dict[str, Any] | None = field(default=None, compare=False)
    id: str | int | float | None = None

    @property
    def is_polygon(self) -> bool:
        return isinstance(self.geometry, Polygon)


@dataclass(frozen=True)
class FeatureCollection:
    """Ordered sequence of features. Order carries no meaning for validation."""

    features: tuple[Feature, ...] = ()

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)

    def __len__(self) -> int:
        return len(self.features)

    def polygons(self) -> Iterator[Polygon]:
        """Yield the polygon geometries, skipping every other geometry type."""
        for feature in self.features:
            if isinstance(feature.geometry, Polygon):
                yield feature.geometry
