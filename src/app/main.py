"""FastAPI application entry point."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import advisor, browse, filters, health, map_view, schools, session, stats
from .config import settings
from .data.catalogue import CatalogueStore, get_store
from .services.session import AppSession, NavigationState

logger = logging.getLogger(__name__)


def create_app(
    store: Optional[CatalogueStore] = None,
    navigation: Optional[NavigationState] = None,
) -> FastAPI:
    app = FastAPI(title=settings.app_name, root_path="")
    if settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.state.session = AppSession(store if store is not None else get_store(), navigation)
    logger.info(f"Serving {len(app.state.session.store.records)} schools")

    # Root endpoint for diagnostics
    @app.get("/")
    def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "api_prefix": settings.api_prefix,
            "health": f"{settings.api_prefix}/health",
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(schools.router, prefix=settings.api_prefix)
    app.include_router(filters.router, prefix=settings.api_prefix)
    app.include_router(stats.router, prefix=settings.api_prefix)
    app.include_router(browse.router, prefix=settings.api_prefix)
    app.include_router(map_view.router, prefix=settings.api_prefix)
    app.include_router(advisor.router, prefix=settings.api_prefix)
    app.include_router(session.router, prefix=settings.api_prefix)
    return app


app = create_app()
