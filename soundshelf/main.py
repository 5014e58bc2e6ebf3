"""
Soundshelf Backend Main Application
FastAPI app factory and startup/shutdown lifecycle
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import get_settings, Settings
from .core.catalog import CatalogRegistry
from .core.loaders import load_catalog
from .api import routes_artists, routes_health, routes_playlists, routes_search, routes_tracks
from .api.errors import register_exception_handlers
from .api.middleware import AdminAuthMiddleware, ApiVersionMiddleware, RequestLoggingMiddleware
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """App lifecycle"""
    config: Settings = app.state.config

    # Startup
    logger.info("=" * 60)
    logger.info(f"{config.APP_NAME} Starting...")
    logger.info("=" * 60)
    logger.info(f"Server Version: {config.APP_VERSION}")
    logger.info(f"API Version: {config.API_VERSION} (prefix {config.API_PREFIX})")

    # An injected catalog (tests, embedding) wins over CATALOG_PATH
    if getattr(app.state, "catalog", None) is None:
        app.state.catalog = load_catalog(config.CATALOG_PATH, config.SAMPLE_DATA_FALLBACK)

    catalog: CatalogRegistry = app.state.catalog
    logger.info(
        f"Catalog: tracks={len(catalog.tracks)}, "
        f"artists={len(catalog.artists)}, playlists={len(catalog.playlists)}"
    )

    logger.info("=" * 60)
    logger.info(f"{config.APP_NAME} Ready!")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info(f"{config.APP_NAME} Shutting down...")


def create_app(
    catalog: Optional[CatalogRegistry] = None,
    settings: Optional[Settings] = None
) -> FastAPI:
    """
    Build the application.

    Args:
        catalog: pre-built catalog; loaded from configuration at startup when omitted
        settings: configuration; read from the environment when omitted
    """
    config = settings or get_settings()
    setup_logging(config.LOG_LEVEL)

    app = FastAPI(
        title=config.APP_NAME,
        description="Music catalog API (tracks, artists, playlists)",
        version=config.APP_VERSION,
        lifespan=lifespan
    )
    app.state.config = config
    app.state.catalog = catalog

    # Middleware: the last one added runs first
    app.add_middleware(
        AdminAuthMiddleware,
        username=config.ADMIN_USERNAME,
        password=config.ADMIN_PASSWORD
    )
    app.add_middleware(ApiVersionMiddleware, version=config.API_VERSION)
    app.add_middleware(RequestLoggingMiddleware, slow_request_sec=config.SLOW_REQUEST_SEC)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-API-Version"],
        max_age=86400,
    )

    register_exception_handlers(app)

    # Routers
    app.include_router(routes_health.router)
    app.include_router(routes_health.router, prefix=config.API_PREFIX)
    app.include_router(routes_tracks.router, prefix=config.API_PREFIX)
    app.include_router(routes_artists.router, prefix=config.API_PREFIX)
    app.include_router(routes_playlists.router, prefix=config.API_PREFIX)
    app.include_router(routes_search.router, prefix=config.API_PREFIX)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "service": config.APP_NAME,
            "version": config.API_VERSION,
            "serverVersion": config.APP_VERSION,
            "docs": "/docs"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)
