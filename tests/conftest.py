"""Shared test fixtures for the diagnostics test suite."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from src.app import create_app
from src.config import Settings


def _test_settings(**overrides) -> Settings:
    """Return settings suitable for testing, ignoring any local .env file."""
    values = {
        "app_name": "LAMP",
        "app_env": "testing",
        "app_debug": True,
        "app_timezone": "UTC",
        "log_format": "console",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    """Test settings."""
    return _test_settings()


@pytest.fixture
def app(settings):
    """Create a fresh FastAPI app for testing."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """HTTP test client."""
    return TestClient(app)


@pytest.fixture
def make_client():
    """Build a client for an app configured with the given overrides."""

    def _make(**overrides) -> TestClient:
        return TestClient(create_app(_test_settings(**overrides)))

    return _make


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch, tmp_path):
    """Keep host and CI variables and any local .env out of the tests."""
    monkeypatch.chdir(tmp_path)
    for field in Settings.model_fields:
        monkeypatch.delenv(field.upper(), raising=False)
