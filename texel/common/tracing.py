"""Request tracing and access logging.

Inbound requests may carry an ``x-request-id`` header; one is generated when
absent. The id and request/response details are kept in context variables
for the duration of the request, so log filters can attach them to every
record, and the id is echoed back on the response.
"""

import contextvars
import time
from logging import getLogger
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from texel.config import CONSTANTS

logger = getLogger(__name__)

# Context variables for request-scoped tracing data
ctx_request_id: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="")
ctx_request: contextvars.ContextVar[dict | None] = contextvars.ContextVar("request", default=None)
ctx_response: contextvars.ContextVar[dict | None] = contextvars.ContextVar(
    "response", default=None
)


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """Middleware to propagate request ids and log one access line per request.

    Responses with status >= 500 are logged at error level.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(CONSTANTS.REQUEST_ID_HEADER) or str(uuid4())
        ctx_request_id.set(request_id)
        ctx_request.set({"url": str(request.url), "method": request.method})

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            ctx_response.set({"status_code": 500})
            logger.error(
                f"{request.method} {request.url.path} 500 ({duration_ms:.1f} ms, unhandled error)"
            )
            raise
        duration_ms = (time.perf_counter() - start) * 1000

        ctx_response.set({"status_code": response.status_code})
        response.headers[CONSTANTS.REQUEST_ID_HEADER] = request_id

        message = (
            f"{request.method} {request.url.path} {response.status_code} "
            f"({duration_ms:.1f} ms)"
        )
        if response.status_code >= 500:
            logger.error(message)
        else:
            logger.info(message)

        return response
