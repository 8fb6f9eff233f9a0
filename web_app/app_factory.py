"""FastAPI application factory."""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from textpub.common.url_builder import join_path_prefix
from .api import api_router
from .web import web_router, page_router
from .middleware.logging import LoggingMiddleware


def create_app(
    store_instance,
    service_instance,
    config,
    logger: logging.Logger = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store_instance: Page store instance (may be None until lifespan startup)
        service_instance: Publisher service instance (may be None until lifespan startup)
        config: Configuration instance
        logger: Optional logger for request logging

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="textpub",
        description="Publish rich text as a shareable page with a QR code",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Store instances in app state for access in routes
    app.state.store = store_instance
    app.state.service = service_instance
    app.state.config = config
    app.state.logger = logger or logging.getLogger("textpub")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(
        LoggingMiddleware,
        logger=(logger.getChild("web") if logger else None),
    )

    # Editor assets (CSS and JS) for the homepage; relative links keep working behind a proxy prefix
    static_path = os.path.join(os.path.dirname(__file__), "..", "ux", "web", "static")
    if os.path.isdir(static_path):
        app.mount("/static", StaticFiles(directory=static_path), name="static")

    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])
    app.include_router(page_router, prefix=join_path_prefix(config.path_prefix), tags=["Web"])

    return app
