"""SiteList API — FastAPI application factory.

Invariants:
    - Routes registered explicitly by create_app (no auto-discovery, no import-time registration)
    - Global error handlers map SiteListError → plain-text 500 responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Factory takes Settings and an optional sites router so servers and tests
      build the app they need; ``app`` is the default-settings instance for uvicorn
"""

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

import app.infrastructure.database as database
from app.api.error_handlers import register_error_handlers
from app.api.routes import health
from app.api.routes.sites import build_sites_router
from app.config import Settings, get_settings
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, sites_router: APIRouter | None = None,
) -> FastAPI:
    """Build the API with its routers, middleware, and error handlers."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        manager = database.init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_create_all:
            await manager.create_all()
        logger.info(
            "SiteList API started", extra={"path": settings.sites_path},
        )
        yield
        logger.info("SiteList API shutting down")
        await manager.dispose()

    app = FastAPI(title="SiteList API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(sites_router or build_sites_router(settings.sites_path))

    register_error_handlers(app)
    return app


app = create_app()
