"""Pytest configuration and fixtures for geobounds tests."""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="function")
def client():
    """Create a test client for the application."""
    from geobounds.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def max_radius(monkeypatch):
    """Set the server's maximum query radius for one test."""
    from geobounds.config import settings

    def _set(value: float) -> None:
        monkeypatch.setattr(settings, "max_radius_km", value)

    return _set
