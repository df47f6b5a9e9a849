"""Root conftest — shared environment, database and HTTP client fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database (StaticPool, FKs on)
    - The app is built with create_app(settings, db_manager): no dependency overrides
    - Lifespan does not run under ASGITransport, so the schema is created here
"""

import os

# Importing groupchat.main builds a module-level app; keep it off the disk.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from groupchat.config import Settings  # noqa: E402
from groupchat.infrastructure.database import DatabaseSessionManager  # noqa: E402
from groupchat.main import create_app  # noqa: E402

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings():
    return Settings(database_url=MEMORY_URL, auto_create_schema=False)


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(MEMORY_URL)
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
def app(test_settings, db_manager):
    return create_app(test_settings, db_manager)


@pytest.fixture
async def client(app):
    """FastAPI test client bound to the per-test database."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
