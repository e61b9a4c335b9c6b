"""Readiness router: reports whether the database is reachable."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from texel.api.dependencies import get_repository
from texel.repositories.repository import Repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/status")


@router.get("/healthz")
def healthz(repository: Repository = Depends(get_repository)):
    """Return 200 when the database answers, 424 (failed dependency) otherwise."""
    try:
        repository.ping()
    except SQLAlchemyError as e:
        logger.warning(f"Database check failed: {e}")
        return JSONResponse(status_code=424, content={})
    return {}
