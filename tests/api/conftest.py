"""API test fixtures — FastAPI app + httpx client over the in-memory database.

Invariants:
    - The app under test reads its DatabaseSessionManager from app.state, as in production
    - No CORS origin is configured, so requests without an Origin header pass the gate

Design Decisions:
    - ASGITransport does not run the lifespan; the manager is attached by hand
"""

import pytest
from httpx import ASGITransport, AsyncClient

from product_api.config import Settings
from product_api.main import create_app


@pytest.fixture
def settings():
    return Settings(database_url="sqlite+aiosqlite:///:memory:")


@pytest.fixture
def test_app(settings, test_manager):
    app = create_app(settings)
    app.state.db_manager = test_manager
    return app


@pytest.fixture
async def client(test_app):
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        yield c
