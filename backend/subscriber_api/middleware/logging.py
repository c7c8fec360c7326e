"""
Subscriber API — Request Logging Middleware
=============================================

What:  One access-log line per request: method, path, status, duration, request id.
Who:   Applied to every request via Starlette middleware, inside RequestIDMiddleware
       so the id is already set.

Example:
    2024-01-15T12:00:00 [WARNING] subscriber_api.access: PATCH /subscribers/42 404 3.1ms [a1b2c3d4] from 10.0.0.7

Log level follows the status: 5xx → ERROR, 4xx → WARNING, otherwise INFO.
Request bodies are never logged (they hold names and email addresses).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from subscriber_api.middleware.request_id import request_id_var

logger = logging.getLogger("subscriber_api.access")

# Polled every few seconds by load balancers
UNLOGGED_PATHS = frozenset({"/health"})


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each handled request with its status and wall-clock duration."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in UNLOGGED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        status = response.status_code

        logger.log(
            _level_for(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
