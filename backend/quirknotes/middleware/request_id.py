"""
QuirkNotes Backend — Request ID Middleware
============================================

What:  Tags every request with a short correlation id.
How:   A client-sent X-Request-ID is kept when it is a sane token (the
       frontend can then match its own logs); anything else is replaced
       with a fresh id. The id lives in a ContextVar for loggers and is
       echoed in the response header.

Error responses built outside this middleware (the catch-all 500 handler
runs in Starlette's ServerErrorMiddleware) read it back through
current_request_id() and set the header themselves.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Letters, digits, dash and underscore; long enough for a full UUID
_CLIENT_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def _accept_or_generate(client_id: Optional[str]) -> str:
    if client_id and _CLIENT_ID_RE.match(client_id):
        return client_id
    return uuid.uuid4().hex[:8]


def current_request_id(request: Request) -> str:
    """
    The id of the request being handled.

    Falls back to request.state, then to the client header, for code that
    runs after the middleware has unwound.
    """
    rid = request_id_var.get("") or getattr(request.state, "request_id", "")
    if not rid:
        rid = _accept_or_generate(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = rid
    return rid


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns the request id and adds it to every response it sees."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = _accept_or_generate(request.headers.get(REQUEST_ID_HEADER))
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
