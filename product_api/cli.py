"""Command line — run the HTTP server or reset the datastore.

Invariants:
    - `serve` never touches the database itself; the app lifespan does
    - `data --clear` drops and recreates every table, then exits 0 (1 on failure)
    - `data` without --clear is a no-op
"""

import asyncio
import logging
from typing import Optional

import typer

from product_api.config import get_settings
from product_api.infrastructure.database import DatabaseSessionManager
from product_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="product-api",
    help="Product REST API",
    add_completion=False,
)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Host to bind to (default: HOST)"),
    port: Optional[int] = typer.Option(None, help="Port to listen on (default: PORT)"),
) -> None:
    """Start the REST API server."""
    import uvicorn

    from product_api.main import create_app

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    bind_host = host or settings.host
    bind_port = port or settings.port

    logger.info(f"REST API listening on port {bind_port}")
    uvicorn.run(
        create_app(settings),
        host=bind_host,
        port=bind_port,
        log_config=None,
    )


async def clear_data(manager: DatabaseSessionManager) -> None:
    """Drop and recreate every table."""
    try:
        await manager.sync(force=True)
    finally:
        await manager.dispose()


@app.command()
def data(
    clear: bool = typer.Option(False, "--clear", help="Delete all data and recreate the schema"),
) -> None:
    """Maintenance tasks for the datastore."""
    if not clear:
        return

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager.from_settings(settings)
    try:
        asyncio.run(clear_data(manager))
    except Exception as e:
        logger.error(f"Failed to clear data: {e}", exc_info=True)
        raise typer.Exit(1)
    logger.info("Data cleared successfully")


if __name__ == "__main__":
    app()
