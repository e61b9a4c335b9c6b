"""Logging filters for structured request logging.

Provides filters that enhance log records with request-scoped fields:
- Request id from the x-request-id header
- HTTP request/response details
- Endpoint filtering to reduce noise from health checks
"""

import logging

from texel.common.tracing import ctx_request, ctx_request_id, ctx_response


class ExtraFieldsFilter(logging.Filter):
    """Adds request fields to log records.

    Enhances log records with:
    - request_id: Request id for cross-service correlation ("-" outside requests)
    - url: Full request URL
    - http: Request method and response status code
    """

    def filter(self, record: logging.LogRecord) -> bool:
        request_id = ctx_request_id.get()
        req = ctx_request.get()
        resp = ctx_response.get()

        record.request_id = request_id or "-"

        http = {}
        if req:
            record.url = {"full": req.get("url")}
            http["request"] = {"method": req.get("method")}
        if resp:
            http["response"] = resp
        if http:
            record.http = http

        return True


class EndpointFilter(logging.Filter):
    """Filters out log messages for specific endpoints.

    Useful for suppressing health check access lines in production.

    Args:
        path: The endpoint path to filter (e.g., "/health")
    """

    def __init__(self, path: str, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._path = path

    def filter(self, record: logging.LogRecord) -> bool:
        return record.getMessage().find(self._path) == -1
