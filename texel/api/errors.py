"""Error payloads returned by the API.

Every error response has the same shape:

    {
        "message": "One or more design rules are violated",
        "error": {"code": 422, "errors": [{"reason": "Overlapped"}]}
    }
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from texel.common.metrics import count_violations
from texel.models.enums import RuleKind

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """An error that is rendered as a structured JSON error response.

    Attributes:
        status_code: HTTP status code
        message: Human-readable summary
        reasons: One entry per individual reason (rule kind, decode error, ...)
    """

    def __init__(self, status_code: int, message: str, reasons: list[str] | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.reasons = reasons or []

    def payload(self) -> dict:
        return {
            "message": self.message,
            "error": {
                "code": self.status_code,
                "errors": [{"reason": reason} for reason in self.reasons],
            },
        }


def design_rule_violations(violations: list[RuleKind]) -> ApiError:
    """Turn failing rule kinds into a 422 error, one reason per failed rule."""
    count_violations(violations)
    return ApiError(
        status_code=422,
        message="One or more design rules are violated",
        reasons=[str(kind) for kind in violations],
    )


def malformed_document(error: Exception) -> ApiError:
    return ApiError(
        status_code=400,
        message="Malformed JSON document is provided",
        reasons=[str(error)],
    )


def internal_error(error: Exception) -> ApiError:
    """500 error that names the failure class without leaking its details."""
    return ApiError(
        status_code=500,
        message="Internal server error",
        reasons=[type(error).__name__],
    )


async def api_error_handler(_request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"Request failed: {exc.message} ({', '.join(exc.reasons)})")
    return JSONResponse(status_code=exc.status_code, content=exc.payload())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any exception the routes did not turn into an ApiError as a 500 payload."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    error = internal_error(exc)
    return JSONResponse(status_code=error.status_code, content=error.payload())
