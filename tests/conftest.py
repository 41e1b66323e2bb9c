"""
Global test fixtures for the Book Catalog API.

This module provides shared fixtures for all tests including:
- Test settings with a known signing secret
- Mock MongoDB (mongomock-motor)
- Token and header factories
- FastAPI test client wired to the mock database
"""

import sys
from datetime import timedelta
from pathlib import Path
from typing import Callable, Generator, Optional

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


TEST_SECRET = "test-secret-key-for-unit-tests"
TEST_DB_NAME = "bookcatalog_test"


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings(monkeypatch):
    """
    Application settings for tests.

    Environment variables are patched and the settings cache is cleared so
    every code path that calls get_settings() sees the same values.
    """
    from bookcatalog.config import get_settings

    monkeypatch.setenv("JWT_SECRET_KEY", TEST_SECRET)
    monkeypatch.setenv("MONGO_DB_NAME", TEST_DB_NAME)
    monkeypatch.setenv("ENVIRONMENT", "test")
    get_settings.cache_clear()

    yield get_settings()

    get_settings.cache_clear()


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    from mongomock_motor import AsyncMongoMockClient

    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_db(mock_async_mongo_client):
    """Provide the mock catalog database with the real indexes."""
    from bookcatalog.database.indexes import create_indexes

    db = mock_async_mongo_client[TEST_DB_NAME]
    await create_indexes(db)
    yield db


# =============================================================================
# User / Token Fixtures
# =============================================================================

@pytest.fixture
def alice_credentials() -> dict:
    """Credentials for the catalog's primary test user."""
    return {"username": "alice01", "password": "secretpw"}


@pytest.fixture
def bob_credentials() -> dict:
    """Credentials for a second user who owns nothing of alice's."""
    return {"username": "bobby02", "password": "hunter2hunter2"}


@pytest.fixture
def make_token(test_settings) -> Callable[..., str]:
    """
    Factory for signed access tokens.

    Usage:
        token = make_token("507f1f77bcf86cd799439011", "alice01")
    """
    from bookcatalog.core.security import create_access_token

    def _make(
        user_id: str,
        username: str,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        return create_access_token(
            user_id=user_id,
            username=username,
            settings=test_settings,
            expires_delta=expires_delta,
        )

    return _make


@pytest.fixture
def bearer() -> Callable[[str], dict]:
    """Build the Authorization header for a bearer token."""
    def _bearer(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}
    return _bearer


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(test_settings, mock_async_mongo_client):
    """
    The FastAPI app with its MongoDB connection pointed at the mock client.

    Lifespan startup reuses the injected client, so indexes are created on
    the mock database exactly as in production.
    """
    import bookcatalog.database.connections as conn_module
    from bookcatalog.main import app

    conn_module._mongo_client = mock_async_mongo_client
    yield app
    conn_module._mongo_client = None


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Use this for synchronous endpoint testing.
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register_and_login(client, bearer) -> Callable[[dict], tuple[str, str]]:
    """
    Register a user through the API and log in.

    Usage:
        token, user_id = register_and_login({"username": ..., "password": ...})
    """
    def _register_and_login(credentials: dict) -> tuple[str, str]:
        client.post("/auth/register", json=credentials)
        response = client.post("/auth/login", json=credentials)
        assert response.status_code == 200, response.text
        token = response.json()["token"]

        me = client.get("/auth/me", headers=bearer(token))
        return token, me.json()["id"]

    return _register_and_login
