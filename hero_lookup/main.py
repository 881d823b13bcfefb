"""Hero Lookup API - FastAPI application factory and standalone entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Hero routes mounted at settings.base_path; everything else falls to 404
    - The hero store is injected by the embedder via create_app(store=...)
    - Global error handlers map HeroLookupError -> structured JSON responses

Design Decisions:
    - Factory over module singleton: each embedder (and each test) builds an
      app around its own store
    - Lifespan seeds the default in-memory store only when none was injected
      (ADR: no global import side effects)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hero_lookup import __version__
from hero_lookup.api.error_handlers import register_error_handlers
from hero_lookup.api.routes import health, heroes
from hero_lookup.config import Settings, get_settings
from hero_lookup.core.repository_protocols import HeroStore
from hero_lookup.infrastructure.hero_store import build_default_store
from hero_lookup.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    store: HeroStore | None = None, settings: Settings | None = None,
) -> FastAPI:
    """Build the lookup API around store (or the configured default store)."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        if app.state.hero_store is None:
            app.state.hero_store = build_default_store(settings.hero_data_file)
        logger.info(f"Hero Lookup API started at {settings.base_path}")
        yield
        logger.info("Hero Lookup API shutting down")

    app = FastAPI(title="Hero Lookup API", version=__version__, lifespan=lifespan)
    app.state.hero_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(heroes.router, prefix=settings.base_path)

    register_error_handlers(app)
    return app


app = create_app()
