"""Product REST API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Single-origin CORS gate is the outermost middleware
    - Global error handlers map ProductApiError → JSON envelopes
    - Database bootstrapped on startup via lifespan; failure is logged, never fatal

Design Decisions:
    - create_app(settings) factory: tests build apps with their own settings
    - Swagger UI at /docs, OpenAPI document at /docs.json; ReDoc disabled
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from product_api import __version__
from product_api.api.cors import SingleOriginCORSMiddleware
from product_api.api.error_handlers import register_error_handlers
from product_api.api.routes import health, products
from product_api.config import Settings, get_settings
from product_api.infrastructure.database import (
    DatabaseSessionManager, connect_db,
)
from product_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

API_DESCRIPTION = "REST API for managing products: name, price and availability."


def create_app(settings: Settings | None = None) -> FastAPI:
    """Assemble middleware, routes, docs and error handlers."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        manager = DatabaseSessionManager.from_settings(settings)
        app.state.db_manager = manager
        await connect_db(manager, force=settings.database_sync_force)
        logger.info("Product API started")
        yield
        logger.info("Product API shutting down")
        await manager.dispose()

    app = FastAPI(
        title="REST API Products",
        version=__version__,
        description=API_DESCRIPTION,
        docs_url="/docs",
        openapi_url="/docs.json",
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(
        SingleOriginCORSMiddleware, allowed_origin=settings.cors_origin,
    )

    app.include_router(products.router)
    app.include_router(health.router)

    register_error_handlers(app)
    return app


app = create_app()
