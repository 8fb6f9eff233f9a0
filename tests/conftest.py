"""Pytest configuration and fixtures."""

import pytest
from typing import AsyncGenerator

from httpx import ASGITransport, AsyncClient

from config import Config
from textpub.pageid import PageIdGenerator
from textpub.sanitizer import HtmlSanitizer
from textpub.service import PagePublisherService
from textpub.storage import MemoryPageStore
from textpub.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def id_generator():
    """Create page id generator."""
    return PageIdGenerator(default_length=10)


@pytest.fixture
def sanitizer():
    """Create HTML sanitizer."""
    return HtmlSanitizer()


@pytest.fixture
def memory_store():
    """Create empty in-memory store."""
    return MemoryPageStore()


@pytest.fixture
def service(memory_store, id_generator, sanitizer, logger) -> PagePublisherService:
    """Create service instance backed by memory."""
    return PagePublisherService(
        store=memory_store,
        id_generator=id_generator,
        sanitizer=sanitizer,
        logger=logger,
    )


@pytest.fixture
def config():
    """Configuration independent of the environment."""
    return Config(
        _env_file=None,
        base_url="http://testserver",
        storage_backend="memory",
        kv_url=None,
        kv_token=None,
        locale="cs",
        display_timezone="Europe/Prague",
        sanitize_html=True,
    )


@pytest.fixture
def app(memory_store, service, config, logger):
    """Create test FastAPI app."""
    return create_app(
        store_instance=memory_store,
        service_instance=service,
        config=config,
        logger=logger,
    )


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_texts():
    """Sample page texts for testing."""
    return [
        "<p>Ahoj světe</p>",
        "<h1>Nadpis</h1><p>Text s <b>tučným</b> písmem.</p>",
        "<ul><li>jedna</li><li>dva</li></ul>",
    ]
