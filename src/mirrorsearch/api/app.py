"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mirrorsearch import __version__
from mirrorsearch.api.routes import health_router, search_router
from mirrorsearch.client import MirrorSearchClient
from mirrorsearch.config import MirrorSearchSettings, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Handles startup and shutdown of resources.
    """
    settings: MirrorSearchSettings = app.state.settings

    logging.getLogger("mirrorsearch").setLevel(settings.log_level.upper())

    logger.info(f"Initializing search client for networks: {', '.join(settings.network_names)}")
    async with MirrorSearchClient(settings) as client:
        app.state.search_client = client
        logger.info("Application startup complete")

        yield

        logger.info("Shutting down application...")

    logger.info("Application shutdown complete")


def create_app(
    settings: MirrorSearchSettings | None = None,
    *,
    title: str = "Mirrorsearch API",
    description: str = "Identifier resolution for ledger explorer search",
    version: str = __version__,
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings. If not provided, loaded from environment.
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs
        version: API version
        cors_origins: List of allowed CORS origins (defaults to the configured ones)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=title,
        description=description,
        version=version,
        debug=settings.debug,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.settings = settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins if cors_origins is not None else settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Register routes
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(search_router, prefix="/api/v1")

    return app


# For uvicorn direct execution
app = create_app()
