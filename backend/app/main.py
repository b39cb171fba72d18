"""Person Service API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PersonServiceError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan
    - lifespan reads app.state.settings: DB, pool and logging follow the Settings
      passed to create_app, never a second read of the environment
    - Interactive docs (/docs, /openapi.json) exposed only in development

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py, registered once here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from app.api.error_handlers import register_error_handlers
from app.infrastructure.database import init_db, close_db
from app.infrastructure.observability import setup_logging
from app.config import Settings, get_settings
from app.api.routes import health, persons

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle, driven by the settings the app was built with."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout,
    )
    logger.info("Person Service API started")
    yield
    await close_db()
    logger.info("Person Service API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application from settings."""
    settings = settings or get_settings()
    docs_enabled = settings.is_development
    application = FastAPI(
        title="Person Service API",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    application.state.settings = settings

    if settings.force_https:
        application.add_middleware(HTTPSRedirectMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes — explicit registration
    application.include_router(health.router)
    application.include_router(persons.router)

    register_error_handlers(application)
    return application


app = create_app()
