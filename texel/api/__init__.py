"""HTTP API for project geometry.

Follows the APIRouter pattern: each feature has its own router module,
assembled here into a single FastAPI app.

Endpoints:
    GET   /health                                          - Liveness check
    GET   /status/healthz                                  - Database readiness check
    GET   /v1/projects/{project_id}/building_limits        - Stored building limits
    PATCH /v1/projects/{project_id}/building_limits        - Validate and store building limits
    GET   /v1/projects/{project_id}/height_plateaus        - Stored height plateaus
    PATCH /v1/projects/{project_id}/height_plateaus        - Validate and store height plateaus
    GET   /v1/projects/{project_id}/split_building_limits  - Limits split by plateaus
"""

from fastapi import FastAPI

from texel.api.errors import ApiError, api_error_handler, unhandled_error_handler
from texel.api.health_router import router as health_router
from texel.api.project_router import router as project_router
from texel.api.status_router import router as status_router
from texel.common.tracing import RequestTracingMiddleware
from texel.repositories.repository import Repository
from texel.rules.engine import DesignRuleEngine


def create_app(repository: Repository, design_rule_engine: DesignRuleEngine) -> FastAPI:
    """Assemble the API around an already initialised repository and engine.

    Args:
        repository: Geometry document repository (schema already created)
        design_rule_engine: Engine built from a frozen rule registry

    Returns:
        FastAPI application
    """
    app = FastAPI(title="Texel Design Rule API")

    app.state.repository = repository
    app.state.design_rule_engine = design_rule_engine

    app.add_middleware(RequestTracingMiddleware)
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(health_router)
    app.include_router(status_router)
    app.include_router(project_router)

    return app


__all__ = ["create_app"]
