"""Shared fixtures for preview server tests."""

import logging

import pytest
from fastapi.testclient import TestClient

from preview_hub.config import Config, PathConfig, ServerConfig
from preview_hub.api.main import create_app


PAGES = {
    "index.html": b"<h1>Index</h1>",
    "embed.html": b"<h1>Embed</h1>",
    "dashboard.html": b"<h1>Dashboard</h1>",
}


@pytest.fixture
def pages_dir(tmp_path):
    """Create the three page files in a temporary directory."""
    pages = tmp_path / "preview"
    pages.mkdir()
    for name, content in PAGES.items():
        (pages / name).write_bytes(content)
    return pages


@pytest.fixture
def config(tmp_path, pages_dir):
    return Config(
        paths=PathConfig(base_dir=tmp_path, pages_dir=pages_dir),
        server=ServerConfig(host="127.0.0.1", port=5000, log_level="info"),
    )


@pytest.fixture
def app(config):
    return create_app(config)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def page_contents():
    return dict(PAGES)


@pytest.fixture(autouse=True)
def reset_logger():
    """Detach handlers added by setup_logging() during a test."""
    yield
    logger = logging.getLogger("preview_hub")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def anyio_backend():
    """Async tests are written for asyncio (e.g. asyncio.gather)."""
    return "asyncio"
