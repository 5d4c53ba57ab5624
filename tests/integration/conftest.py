"""Shared fixtures for integration tests."""

import pytest
from fastapi.testclient import TestClient

from qurantree.api.main import create_app


@pytest.fixture
def app(settings, library):
    """Application over the in-memory fixture library."""
    return create_app(settings=settings, library=library)


@pytest.fixture
def client(app):
    """Test client for the fixture application."""
    return TestClient(app)
