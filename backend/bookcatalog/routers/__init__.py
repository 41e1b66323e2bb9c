"""
API Routers module.
"""
from bookcatalog.routers import auth, books, health

__all__ = ["auth", "books", "health"]
