"""Shared pytest fixtures."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from banner_server import renderer  # noqa: E402
from banner_server.server import app  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_renderer():
    """Every test starts without a cached renderer."""
    renderer.reset_renderer()
    yield
    renderer.reset_renderer()


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
