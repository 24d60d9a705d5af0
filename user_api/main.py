"""User Directory API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UserApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - DatabaseSessionManager created on startup, stored on app.state,
      disposed on shutdown (lifespan context manager)

Design Decisions:
    - create_app() factory plus module-level `app` for `uvicorn user_api.main:app`
    - Tables created on startup when database_create_tables is set; existing
      tables are never altered
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_api import __version__
from user_api.api.error_handlers import register_error_handlers
from user_api.api.routes import health, users
from user_api.config import Settings, get_settings
from user_api.infrastructure.database import DatabaseSessionManager
from user_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await db_manager.create_tables()
    app.state.db_manager = db_manager
    logger.info("User Directory API started")
    try:
        yield
    finally:
        logger.info("User Directory API shutting down")
        await db_manager.dispose()
        app.state.db_manager = None


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="User Directory API", version=__version__, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db_manager = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "user_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
