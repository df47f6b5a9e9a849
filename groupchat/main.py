"""Group Chat API — FastAPI application factory and ASGI entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Components wired by constructor injection in create_app, kept on app.state
    - One error mapper (api/error_handlers.py) for every failure
    - Schema created on startup when auto_create_schema is on

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app accepts Settings and a DatabaseSessionManager so tests run
      against their own in-memory database without dependency overrides
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from groupchat.api.dependencies import build_services
from groupchat.api.error_handlers import register_error_handlers
from groupchat.api.routes import groups, health, root
from groupchat.config import Settings, get_settings
from groupchat.infrastructure.database import DatabaseSessionManager
from groupchat.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    db_manager: DatabaseSessionManager | None = None,
) -> FastAPI:
    """Build a fully wired application."""
    settings = settings or get_settings()
    owns_db = db_manager is None
    db = db_manager or DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        if settings.auto_create_schema:
            await db.create_schema()
        logger.info("Group chat API started")
        yield
        if owns_db:
            await db.dispose()
        logger.info("Group chat API shutting down")

    app = FastAPI(title="Group Chat API", version="1.0.0", lifespan=lifespan)
    app.state.services = build_services(settings, db)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(root.router)
    app.include_router(health.router)
    app.include_router(groups.router)

    register_error_handlers(app, settings)
    return app


app = create_app()
