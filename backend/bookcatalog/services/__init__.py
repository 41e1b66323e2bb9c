"""
Service layer for business logic.
"""
from bookcatalog.services.auth_service import AuthService
from bookcatalog.services.book_service import BookService

__all__ = [
    "AuthService",
    "BookService",
]
