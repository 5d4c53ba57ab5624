"""FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qurantree import __version__
from qurantree.api.middleware import CacheControlMiddleware, setup_logging
from qurantree.api.routes import api_documentation, router
from qurantree.config import Settings
from qurantree.library import Library

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, library: Library | None = None
) -> FastAPI:
    """Create the FastAPI application.

    The corpus is loaded here, before the app is returned, so a missing
    or malformed data file stops startup instead of serving partial data.

    Args:
        settings: Application settings (default: Settings())
        library: Preloaded library; loaded from settings when None

    Raises:
        LoadFailure: If the corpus or a translation cannot be loaded
    """
    settings = settings or Settings()
    if library is None:
        library = Library.load(settings)

    app = FastAPI(
        title="qurantree",
        description="Quran text, translations and search",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.library = library

    app.add_middleware(CacheControlMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    @app.get("/")
    def root():
        """Root endpoint with API documentation."""
        return api_documentation()

    return app


def run_server(
    host: str | None = None,
    port: int | None = None,
    settings: Settings | None = None,
) -> None:
    """Load the corpus and serve the API with uvicorn.

    Args:
        host: Bind host (default: settings.host)
        port: Bind port (default: settings.port)
        settings: Application settings (default: Settings())
    """
    import uvicorn

    settings = settings or Settings()
    setup_logging(settings.log_level)

    app = create_app(settings)
    host = host or settings.host
    port = port or settings.port
    logger.info(f"Serving qurantree on http://{host}:{port}")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=settings.log_level,
    )
