"""
Notes Service — Request ID Middleware
=======================================

What:  Assigns a short ID to each request and returns it in X-Request-ID.
Why:   Lets log lines from one request be correlated, and lets a client quote
       the ID when reporting an error.
How:   Honors a client-supplied X-Request-ID, otherwise generates one; stores
       it in a ContextVar (for loggers) and in request.state (for handlers).
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


def current_request_id(request: Request) -> str:
    """Request ID for `request`, falling back to the ContextVar."""
    return getattr(request.state, "request_id", "") or request_id_var.get("")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that tags each request and response with a request ID."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 hex chars are plenty for correlating log lines
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
