# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Provides an in-memory MongoStore backed by mongomock
# - Provides a TestClient wired to that store
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGODB_DB_NAME", "users_api_test")
os.environ.setdefault("NODE_ENV", "development")
os.environ.setdefault("DEBUG", "true")

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.models.user import MONGO_INDEXES
from core.services.user_service import UserService
from lib.mongo_client import MongoStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings that ignore any local .env file."""
    return Settings(_env_file=None, NODE_ENV="development")


@pytest.fixture
def mongo_store():
    """Connected MongoStore with a fresh in-memory database."""
    store = MongoStore(
        "mongodb://localhost:27017",
        "users_api_test",
        client_factory=mongomock.MongoClient,
        indexes=MONGO_INDEXES,
    )
    store.connect()
    yield store
    store.close()


@pytest.fixture
def user_service(mongo_store):
    return UserService(mongo_store)


@pytest.fixture
def client(mongo_store, test_settings):
    """TestClient for an app backed by the in-memory store."""
    app = create_app(mongo_store, settings=test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_user_payload():
    return {"name": "erin", "email": "erin@example.com"}
