"""
Pydantic models for database documents and data structures.
"""
from bookcatalog.models.user import User, Identity
from bookcatalog.models.book import Book

__all__ = [
    "User",
    "Identity",
    "Book",
]
