from texel.models.geometry import Feature, FeatureCollection, OtherGeometry, Polygon

UNIT_SQUARE = [[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]


def polygon(*rings) -> Polygon:
    """Build a Polygon from lists of [x, y] pairs."""
    return Polygon(rings=tuple(tuple((float(x), float(y)) for x, y in ring) for ring in rings))


def square(x: float, y: float, size: float) -> Polygon:
    """Closed axis-aligned square with its first vertex at (x, y)."""
    return polygon([[x, y], [x, y + size], [x + size, y + size], [x + size, y], [x, y]])


def point(x: float, y: float) -> OtherGeometry:
    return OtherGeometry(type="Point", payload={"type": "Point", "coordinates": [x, y]})


def collection(*geometries, properties=None) -> FeatureCollection:
    """Build a FeatureCollection with one feature per geometry."""
    return FeatureCollection(
        features=tuple(Feature(geometry=g, properties=properties) for g in geometries)
    )


def geojson(*rings_per_feature, properties=None) -> dict:
    """Build a GeoJSON FeatureCollection with one Polygon feature per list of rings.

    Example:
        geojson([UNIT_SQUARE], [outer, hole])  # two features, the second with a hole
    """
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {"type": "Polygon", "coordinates": rings},
                "properties": properties,
            }
            for rings in rings_per_feature
        ],
    }
