"""
Bookmarks API - Request Logging Middleware
==========================================

What:  One access-log line per HTTP request.
How:   Measures time around `call_next` and logs method, path, status,
       duration, request ID and client IP. Requests addressed to a single
       bookmark also carry its id, read from the matched route path params.
       The level follows the status class: 5xx → ERROR, 4xx → WARNING,
       otherwise INFO.
Who:   Applied to every request via Starlette middleware.

Never logged: request bodies and the Authorization header.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from bookmarks_api.middleware.request_id import request_id_var

logger = logging.getLogger("bookmarks_api.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration for each request."""

    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        response = await call_next(request)
        # Filled in by the router once the route has matched
        bookmark_id = request.scope.get("path_params", {}).get("bookmark_id")

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] bookmark=%s from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            bookmark_id if bookmark_id is not None else "-",
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "bookmark_id": bookmark_id,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
