"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for testing the
services directly against the mock database.
"""

import pytest
import pytest_asyncio


# =============================================================================
# Identity Fixtures
# =============================================================================

@pytest.fixture
def alice():
    """Authenticated identity of the owner in most scenarios."""
    from bookcatalog.models.user import Identity

    return Identity(id="507f1f77bcf86cd799439011", username="alice01")


@pytest.fixture
def bob():
    """Authenticated identity of a user who does not own alice's books."""
    from bookcatalog.models.user import Identity

    return Identity(id="507f1f77bcf86cd799439012", username="bobby02")


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def auth_service(mock_db, test_settings):
    """AuthService backed by the mock catalog database."""
    from bookcatalog.services.auth_service import AuthService

    return AuthService(mock_db, test_settings)


@pytest.fixture
def book_service(mock_db):
    """BookService backed by the mock catalog database."""
    from bookcatalog.services.book_service import BookService

    return BookService(mock_db)


@pytest.fixture
def book_fields() -> dict:
    """Valid create/replace payload in wire spelling."""
    return {"title": "Go", "author": "X", "publishedYear": 2020}


@pytest_asyncio.fixture
async def alice_book(book_service, alice, book_fields):
    """A book already created by alice."""
    from bookcatalog.schemas.book import BookCreate

    return await book_service.create_book(alice, BookCreate(**book_fields))


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, message: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert data["status"] == status_code
        assert "message" in data
        if message:
            assert data["message"] == message
    return _assert
