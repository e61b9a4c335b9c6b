"""FastAPI dependencies shared by the routers.

The repository and the design rule engine are created once at startup and
kept on ``app.state``; tests build an app around their own instances.
"""

from uuid import UUID

from fastapi import Request

from texel.api.errors import ApiError
from texel.repositories.repository import Repository
from texel.rules.engine import DesignRuleEngine


def get_repository(request: Request) -> Repository:
    return request.app.state.repository


def get_design_rule_engine(request: Request) -> DesignRuleEngine:
    return request.app.state.design_rule_engine


def get_project_id(project_id: str) -> str:
    """Validate the project id path parameter and return its canonical form.

    Raises:
        ApiError: 400 if the id is not a UUID
    """
    try:
        return str(UUID(project_id))
    except ValueError as e:
        raise ApiError(
            status_code=400,
            message="Project id must be a UUID",
            reasons=[project_id],
        ) from e


async def read_document(request: Request) -> bytes:
    """Raw request body, read up front so that route handlers can stay synchronous."""
    return await request.body()
