"""Single-Origin CORS Gate — rejects every request whose Origin is not the configured one.

Invariants:
    - Origin header (None when absent) must equal the allowed origin (None when unset)
    - A mismatch is answered with 403 before routing; the app is never called
    - Allowed cross-origin requests, preflight included, get Starlette's CORS headers
"""

import logging

from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send

from product_api.core.errors import CorsOriginError

logger = logging.getLogger(__name__)


class SingleOriginCORSMiddleware(CORSMiddleware):
    """CORSMiddleware restricted to exactly one origin, rejecting the rest."""

    def __init__(self, app: ASGIApp, allowed_origin: str | None = None):
        super().__init__(
            app,
            allow_origins=[allowed_origin] if allowed_origin else [],
            allow_methods=["*"],
            allow_headers=["*"],
        )
        self.allowed_origin = allowed_origin

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        origin = Headers(scope=scope).get("origin")
        if origin != self.allowed_origin:
            error = CorsOriginError(origin)
            logger.warning(
                error.message,
                extra={"origin": origin, "path": scope.get("path")},
            )
            response = JSONResponse(
                status_code=error.http_status, content=error.to_response(),
            )
            await response(scope, receive, send)
            return

        await super().__call__(scope, receive, send)
