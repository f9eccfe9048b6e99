"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Connection string, port and allowed origin come from the environment (or .env)
    - get_settings() is cached (lru_cache) — single instance per process
    - cors_origin is a single origin, not a list; unset means "no Origin header"

Design Decisions:
    - Defaults run out-of-the-box against a local SQLite file
    - postgres:// and postgresql:// URLs are rewritten for the asyncpg driver
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, populate_by_name=True,
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./products.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgres:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str):
            for prefix in ("postgres://", "postgresql://"):
                if v.startswith(prefix):
                    return v.replace(prefix, "postgresql+asyncpg://", 1)
        return v

    database_ssl: bool = False
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_sync_force: bool = False
    database_echo: bool = False

    # HTTP
    host: str = "0.0.0.0"
    port: int = 9001
    cors_origin: str | None = Field(default=None, alias="origin")

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    return Settings()
