"""Project geometry endpoints.

Endpoints (all under /v1/projects/{project_id}):
    GET   /building_limits        - Stored building limits
    PATCH /building_limits        - Validate and store building limits
    GET   /height_plateaus        - Stored height plateaus
    PATCH /height_plateaus        - Validate and store height plateaus
    GET   /split_building_limits  - Building limits split by height plateaus

Write pipeline: decode → collection rules → split rules against the stored
complementary layer → store. Height plateaus are always the dependent layer
and building limits the reference, whichever of the two is being written: a
PATCH of building limits checks the stored plateaus against the new limits,
not the new limits against the stored plateaus.
"""

import json
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from texel.api.dependencies import (
    get_design_rule_engine,
    get_project_id,
    get_repository,
    read_document,
)
from texel.api.errors import ApiError, design_rule_violations, internal_error, malformed_document
from texel.models.enums import ObjectKind
from texel.models.geojson import (
    GeoJsonDecodeError,
    dump_feature_collection,
    parse_feature_collection,
)
from texel.models.geometry import FeatureCollection
from texel.repositories.repository import NotFoundError, Repository
from texel.rules.engine import DesignRuleEngine
from texel.spatial.splits import split_building_limits

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/projects/{project_id}")


def _fetch(repository: Repository, project_id: str, kind: ObjectKind) -> FeatureCollection | None:
    """Load and decode a stored collection, or None when nothing is stored."""
    try:
        document = repository.get(project_id, kind)
    except NotFoundError:
        logger.info(f"No {kind} stored for project {project_id}")
        return None
    except SQLAlchemyError as e:
        logger.exception(f"Failed to load {kind} for project {project_id}")
        raise internal_error(e) from e

    try:
        return parse_feature_collection(document)
    except GeoJsonDecodeError as e:
        logger.exception(f"Stored {kind} for project {project_id} cannot be decoded")
        raise internal_error(e) from e


def _store(
    repository: Repository, project_id: str, kind: ObjectKind, collection: FeatureCollection
) -> None:
    try:
        repository.put(project_id, kind, json.dumps(dump_feature_collection(collection)))
    except SQLAlchemyError as e:
        logger.exception(f"Failed to store {kind} for project {project_id}")
        raise internal_error(e) from e


def _decode(document: bytes) -> FeatureCollection:
    try:
        return parse_feature_collection(document)
    except GeoJsonDecodeError as e:
        logger.info(f"Rejected malformed document: {e}")
        raise malformed_document(e) from e


def _check_collection(dre: DesignRuleEngine, collection: FeatureCollection) -> None:
    ok, violations = dre.validate_collection(collection)
    if not ok:
        raise design_rule_violations(violations)


def _check_splits(
    dre: DesignRuleEngine, height_plateaus: FeatureCollection, building_limits: FeatureCollection
) -> None:
    ok, violations = dre.validate_splits(height_plateaus, building_limits)
    if not ok:
        raise design_rule_violations(violations)


def _respond(collection: FeatureCollection | None) -> dict:
    if collection is None:
        return {}
    return {"data": dump_feature_collection(collection)}


@router.get("/building_limits")
def get_building_limits(
    project_id: str = Depends(get_project_id),
    repository: Repository = Depends(get_repository),
):
    """Return the stored building limits, or an empty object if none are stored."""
    return _respond(_fetch(repository, project_id, ObjectKind.BUILDING_LIMITS))


@router.patch("/building_limits")
def update_building_limits(
    project_id: str = Depends(get_project_id),
    document: bytes = Depends(read_document),
    repository: Repository = Depends(get_repository),
    dre: DesignRuleEngine = Depends(get_design_rule_engine),
):
    """Validate and store building limits.

    If height plateaus are already stored, they must still lie within the new
    building limits.

    Raises:
        ApiError 400: If the body is not a GeoJSON FeatureCollection
        ApiError 422: If a design rule is violated
    """
    building_limits = _decode(document)
    _check_collection(dre, building_limits)

    height_plateaus = _fetch(repository, project_id, ObjectKind.HEIGHT_PLATEAUS)
    if height_plateaus is not None:
        _check_splits(dre, height_plateaus, building_limits)

    _store(repository, project_id, ObjectKind.BUILDING_LIMITS, building_limits)
    logger.info(f"Stored {len(building_limits)} building limits for project {project_id}")

    return _respond(building_limits)


@router.get("/height_plateaus")
def get_height_plateaus(
    project_id: str = Depends(get_project_id),
    repository: Repository = Depends(get_repository),
):
    """Return the stored height plateaus, or an empty object if none are stored."""
    return _respond(_fetch(repository, project_id, ObjectKind.HEIGHT_PLATEAUS))


@router.patch("/height_plateaus")
def update_height_plateaus(
    project_id: str = Depends(get_project_id),
    document: bytes = Depends(read_document),
    repository: Repository = Depends(get_repository),
    dre: DesignRuleEngine = Depends(get_design_rule_engine),
):
    """Validate and store height plateaus.

    Building limits must already be stored, and every plateau must lie within
    one of them.

    Raises:
        ApiError 400: If the body is not a GeoJSON FeatureCollection
        ApiError 422: If building limits are missing or a design rule is violated
    """
    height_plateaus = _decode(document)
    _check_collection(dre, height_plateaus)

    building_limits = _fetch(repository, project_id, ObjectKind.BUILDING_LIMITS)
    if building_limits is None:
        raise ApiError(
            status_code=422,
            message="Building limits don't exist",
            reasons=["BuildingLimitsNotFound"],
        )
    _check_splits(dre, height_plateaus, building_limits)

    _store(repository, project_id, ObjectKind.HEIGHT_PLATEAUS, height_plateaus)
    logger.info(f"Stored {len(height_plateaus)} height plateaus for project {project_id}")

    return _respond(height_plateaus)


@router.get("/split_building_limits")
def get_split_building_limits(
    project_id: str = Depends(get_project_id),
    repository: Repository = Depends(get_repository),
):
    """Return building limits split by height plateaus.

    Empty object unless both building limits and height plateaus are stored.
    """
    building_limits = _fetch(repository, project_id, ObjectKind.BUILDING_LIMITS)
    height_plateaus = _fetch(repository, project_id, ObjectKind.HEIGHT_PLATEAUS)
    if building_limits is None or height_plateaus is None:
        return {}

    return _respond(split_building_limits(building_limits, height_plateaus))
