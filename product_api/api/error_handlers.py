"""Error Handlers — global exception handlers for the product API.

Invariants:
    - ProductApiError → its own status and envelope ({"error"} or {"errors"})
    - Exception (catch-all) → 500, never leaks internal details
    - Field validation never reaches FastAPI's own validator: ids arrive as str and
      bodies are read raw, so rule-chain errors are the only 400 shape
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from product_api.core.errors import ErrorSeverity, ProductApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_product_error_handler(app)
    _register_generic_error_handler(app)


def _register_product_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ProductApiError)
    async def product_error_handler(request: Request, exc: ProductApiError):
        """Handle all domain/infrastructure errors."""
        level = (
            logging.WARNING if exc.severity == ErrorSeverity.WARNING
            else logging.ERROR
        )
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )
