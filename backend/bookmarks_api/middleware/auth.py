"""
Bookmarks API - Bearer Token Middleware
=======================================

What:  Rejects requests that do not carry the configured API token.
How:   Reads `Authorization: Bearer <token>` and compares the token with
       `settings.api_token` in constant time. On mismatch the request never
       reaches a route: the middleware answers 401 itself.
Who:   Applied to every request via Starlette middleware.

Response on rejection:
    HTTP 401
    {"error": "Unauthorized request"}

Open paths:
    - OPTIONS preflight requests (answered by CORS)
    - /health and the API documentation
"""

import hmac
import logging
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from bookmarks_api.config import settings

logger = logging.getLogger(__name__)

UNAUTHORIZED_BODY = {"error": "Unauthorized request"}


def extract_bearer_token(header_value: Optional[str]) -> Optional[str]:
    """Returns the token of a `Bearer <token>` header, or None."""
    if not header_value:
        return None
    scheme, _, token = header_value.partition(" ")
    if scheme.lower() != "bearer":
        return None
    token = token.strip()
    return token or None


class BearerTokenMiddleware(BaseHTTPMiddleware):
    """Requires the shared API token on every non-exempt request."""

    EXCLUDED_PATHS = {"/health", "/docs", "/openapi.json", "/redoc"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "OPTIONS" or request.url.path in self.EXCLUDED_PATHS:
            return await call_next(request)

        token = extract_bearer_token(request.headers.get("Authorization"))
        expected = settings.api_token

        if not token or not expected or not hmac.compare_digest(
            token.encode("utf-8"), expected.encode("utf-8")
        ):
            logger.warning(
                "Unauthorized request to path: %s %s", request.method, request.url.path
            )
            return JSONResponse(status_code=401, content=UNAUTHORIZED_BODY)

        return await call_next(request)
