"""Async Engine Factory — builds the engine used by DatabaseSessionManager and tests.

Invariants:
    - Foreign keys are enforced on SQLite connections (off by default in SQLite)
    - In-memory SQLite uses a StaticPool: every session sees the same database

Design Decisions:
    - Pool sizing only applies to server databases; SQLite file databases keep
      SQLAlchemy's default pool, in-memory ones must share a single connection
"""

from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool


def is_memory_sqlite(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def engine_options(
    database_url: str, pool_size: int = 20, max_overflow: int = 10,
) -> dict[str, Any]:
    """Engine kwargs appropriate for the backend named by database_url."""
    backend = make_url(database_url).get_backend_name()
    if is_memory_sqlite(database_url):
        return {"poolclass": StaticPool}
    if backend == "sqlite":
        return {}
    return {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on FK enforcement for every new SQLite connection."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(
    database_url: str, pool_size: int = 20, max_overflow: int = 10,
) -> AsyncEngine:
    engine = create_async_engine(
        database_url, **engine_options(database_url, pool_size, max_overflow),
    )
    enable_sqlite_foreign_keys(engine)
    return engine
