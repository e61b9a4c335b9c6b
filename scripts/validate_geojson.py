#!/usr/bin/env python

"""Check GeoJSON files against the design rules without running the API.

This script is for LOCAL DEVELOPMENT ONLY. It runs the same design rule
engine as the service on files from disk:

    1. Decode COLLECTION as a GeoJSON FeatureCollection
    2. Run the collection rules on it
    3. With --reference, run the split rules with COLLECTION as the dependent
       layer (e.g. height plateaus) and REFERENCE as the reference layer
       (e.g. building limits)

Exits with status 1 if the file is malformed or any rule is violated.

Usage:
    uv run python scripts/validate_geojson.py plateaus.geojson --reference limits.geojson
    uv run python scripts/validate_geojson.py --help
"""

import logging
from pathlib import Path

import typer

from texel.models.geojson import GeoJsonDecodeError, parse_feature_collection
from texel.models.geometry import FeatureCollection
from texel.rules import DesignRuleEngine, create_default_registry

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = typer.Typer(help="Check GeoJSON files against the design rules")


def load_collection(path: Path) -> FeatureCollection:
    """Decode a GeoJSON file, exiting with status 1 if it is malformed."""
    try:
        return parse_feature_collection(path.read_bytes())
    except GeoJsonDecodeError as e:
        logger.error(f"{path} is not a valid FeatureCollection: {e}")
        raise typer.Exit(code=1) from e


@app.command()
def validate(
    collection_file: Path = typer.Argument(
        ...,
        help="GeoJSON FeatureCollection to validate",
        exists=True,
    ),
    reference_file: Path | None = typer.Option(
        None,
        "--reference",
        "-r",
        help="Reference FeatureCollection for the split rules",
        exists=True,
    ),
):
    """Run the design rules and print every violation."""
    engine = DesignRuleEngine(create_default_registry())

    collection = load_collection(collection_file)
    logger.info(f"Loaded {len(collection)} features from {collection_file}")

    ok, violations = engine.validate_collection(collection)

    if ok and reference_file is not None:
        reference = load_collection(reference_file)
        logger.info(f"Loaded {len(reference)} reference features from {reference_file}")
        ok, violations = engine.validate_splits(collection, reference)

    if not ok:
        for kind in violations:
            typer.echo(f"violation: {kind}")
        raise typer.Exit(code=1)

    typer.echo("ok")


if __name__ == "__main__":
    app()
