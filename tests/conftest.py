"""Pytest configuration and fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from shortlink.common.logging_config import setup_logging
from shortlink.config import Config
from shortlink.database.memory import InMemoryLinkStore
from shortlink.redirect import RedirectService
from shortlink.registry import LinkRegistry
from shortlink.shortcode import ShortCodeGenerator
from shortlink.web_app import create_app


BASE_URL = "http://sho.rt"


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger):
    """Fresh in-memory store per test."""
    return InMemoryLinkStore(logger=logger)


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=8)


@pytest.fixture
def registry(store, short_code_generator, logger):
    """Create link registry."""
    return LinkRegistry(
        store=store,
        base_url=BASE_URL,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def redirects(store, logger):
    """Create redirect service without cache."""
    return RedirectService(store=store, cache=None, logger=logger)


@pytest.fixture
def config():
    """Test configuration using the in-memory store."""
    return Config(
        database_url="memory://",
        base_url=BASE_URL,
        frontend_url="http://localhost:3000",
        redis_url=None,
    )


@pytest.fixture
def app(store, registry, redirects, config):
    """Create test FastAPI app."""
    return create_app(
        store=store,
        cache=None,
        registry=registry,
        redirects=redirects,
        config=config,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
