"""Database Session Manager — async engine, per-request sessions and startup bootstrap.

Invariants:
    - One DatabaseSessionManager per process, built in the app lifespan and kept on app.state
    - Every session auto-rolls-back on SQLAlchemy failure (no partial commits leak)
    - All SQLAlchemy exceptions raised inside a session are mapped to DatabaseError
    - connect_db() never raises: a failed bootstrap is logged and the process keeps serving

Design Decisions:
    - Handle passed explicitly: get_db reads request.app.state, repositories receive a session
    - Fail-open bootstrap: requests that need the datastore fail on their own later
    - expire_on_commit=False: objects stay readable after commit in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from product_api.config import Settings
from product_api.core.errors import DatabaseError
from product_api.db.base import Base
import product_api.models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages the async engine, session factory and schema bootstrap."""

    def __init__(self, database_url: str, **engine_kwargs: Any):
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatabaseSessionManager":
        """Build the manager with pool and TLS options for the configured backend."""
        kwargs: dict[str, Any] = {"echo": settings.database_echo}
        if not settings.is_sqlite:
            kwargs.update(
                pool_size=settings.database_pool_size,
                max_overflow=settings.database_max_overflow,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
            if settings.database_ssl:
                kwargs["connect_args"] = {"ssl": "require"}
        return cls(settings.database_url, **kwargs)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise DatabaseError("Integrity constraint violated", "commit")
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown")
        finally:
            await session.close()

    async def authenticate(self) -> None:
        """Open a connection and run a trivial query; raises on failure."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def sync(self, force: bool = False) -> None:
        """Create missing tables; with force, drop every table first."""
        async with self.engine.begin() as conn:
            if force:
                await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        logger.info(
            "Database schema synchronised",
            extra={"forced": force},
        )

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            await self.authenticate()
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


async def connect_db(
    manager: DatabaseSessionManager, force: bool = False,
) -> bool:
    """Verify connectivity and synchronise the schema. Logs and returns False on failure."""
    try:
        await manager.authenticate()
        await manager.sync(force=force)
    except Exception as e:
        logger.error(f"Database connection failed: {e}", exc_info=True)
        return False
    logger.info("Database connection established")
    return True


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    manager: DatabaseSessionManager | None = getattr(
        request.app.state, "db_manager", None,
    )
    if manager is None:
        raise RuntimeError("Database not initialized")
    async with manager.session() as session:
        yield session
