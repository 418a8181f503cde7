"""
QuirkNotes Backend — Access Log Middleware
============================================

One line per request on the `quirknotes.access` logger, written after the
router has run so the line can name the note operation that handled it:

    PATCH /patchNote/{note_id} 404 2.3ms op=patch_note note=3f2a... [1a2b3c4d]

The route template is logged instead of the raw path, which keeps note ids
out of the path column and lets log queries group by endpoint. The id is
still available in the `note_id` extra field.

Note titles and contents are never logged.
"""

import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from quirknotes.config import settings
from quirknotes.middleware.request_id import current_request_id

logger = logging.getLogger("quirknotes.access")


def _status_level(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def _route_template(request: Request) -> Optional[str]:
    route = request.scope.get("route")
    return getattr(route, "path", None)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log keyed by note operation; paths in ACCESS_LOG_SKIP_PATHS are silent."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in settings.access_log_skip_paths_list:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        # Filled in by the router during call_next; absent for unmatched paths
        endpoint = request.scope.get("endpoint")
        operation = getattr(endpoint, "__name__", "-")
        route = _route_template(request) or request.url.path
        note_id = request.path_params.get("note_id")
        rid = current_request_id(request)
        status = response.status_code

        logger.log(
            _status_level(status),
            "%s %s %d %.1fms op=%s%s [%s]",
            request.method,
            route,
            status,
            duration_ms,
            operation,
            f" note={note_id}" if note_id else "",
            rid,
            extra={
                "request_id": rid,
                "method": request.method,
                "route": route,
                "operation": operation,
                "note_id": note_id,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": request.client.host if request.client else "unknown",
            },
        )

        return response
