# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides in-memory fakes for the database and media storage
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
for _name in ("CLOUDINARY_CLOUD_NAME", "CLOUDINARY_API_KEY", "CLOUDINARY_API_SECRET"):
    os.environ.pop(_name, None)

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from tests.fakes import FakeDatabase, FakeMediaStorage


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def make_settings():
    """Build Settings without reading a .env file."""
    def _make(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)
    return _make


@pytest.fixture
def fake_database():
    return FakeDatabase()


@pytest.fixture
def fake_media_storage():
    return FakeMediaStorage()


@pytest.fixture
def build_app(make_settings, fake_database, fake_media_storage):
    """
    Factory for an app wired to fakes.

    Lifespan (and therefore bootstrap) only runs when a test enters the
    TestClient as a context manager.
    """
    def _build(**kwargs):
        environment = kwargs.pop("environment", "production")
        config = kwargs.pop("config", None) or make_settings(ENVIRONMENT=environment)
        kwargs.setdefault("database", fake_database)
        kwargs.setdefault("media_storage", fake_media_storage)
        kwargs.setdefault("on_bootstrap_failure", lambda outcome: None)
        return create_app(config=config, **kwargs)
    return _build


@pytest.fixture
def client(build_app):
    """TestClient that turns handler exceptions into responses."""
    return TestClient(build_app(), raise_server_exceptions=False)
