#!/usr/bin/env python3
"""
Main entry point for the textpub service.

Concurrency: a single process handles requests concurrently via async I/O
(FastAPI + redis.asyncio; file I/O and QR rendering run in worker threads).

Usage:
    python app.py

Environment variables:
    STORAGE_BACKEND - auto, memory, file or redis (default auto)
    KV_URL / KV_TOKEN - Remote key-value store endpoint and token
    DATA_DIR - Directory for the file backend
    BASE_URL - Fallback base URL for page links
    PORT - Port to listen on
    LOCALE - Page language (cs, en)
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from textpub.pageid import PageIdGenerator
from textpub.sanitizer import HtmlSanitizer
from textpub.service import PagePublisherService
from textpub.storage import create_page_store
from textpub.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting textpub service...")

    store = create_page_store(config, logger=logger.getChild("storage"))
    logger.info(f"Page store backend: {store.backend_name}")

    service = PagePublisherService(
        store=store,
        id_generator=PageIdGenerator(default_length=config.page_id_length),
        sanitizer=HtmlSanitizer() if config.sanitize_html else None,
        logger=logger.getChild("service"),
    )
    if not config.sanitize_html:
        logger.warning("HTML sanitization disabled; submitted markup is stored as-is")

    app.state.store = store
    app.state.service = service

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down textpub service...")
    await service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("textpub")
    logger.info(f"Configuration: {config.safe_dump()}")

    # Store and service are created in lifespan
    app = create_app(
        store_instance=None,
        service_instance=None,
        config=config,
        logger=logger,
    )
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=False,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on http://{config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
