"""
Subscriber API — Request ID Middleware
========================================

What:  Assigns a correlation id to each request and returns it in X-Request-ID.
Why:   Error bodies carry only {"message": ...}; the header is how a client
       quotes a failing request back to us, and every log line for that
       request carries the same id.
How:   Reuses a client-supplied X-Request-ID when it looks sane, otherwise
       generates a short UUID; stores it in a ContextVar for loggers and
       exception handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
MAX_CLIENT_ID_LENGTH = 64

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def _new_request_id() -> str:
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Take X-Request-ID from the client if present, printable and short
        2. Otherwise generate an 8-character id
        3. Expose it via request_id_var
        4. Echo it in the response header
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER, "").strip()
        if not rid or len(rid) > MAX_CLIENT_ID_LENGTH or not rid.isprintable():
            rid = _new_request_id()

        token = request_id_var.set(rid)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
