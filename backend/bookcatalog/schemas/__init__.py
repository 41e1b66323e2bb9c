"""
Request and response schemas for API endpoints.
"""
from bookcatalog.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    LoginResponse,
    UserPublic,
    TokenPayload,
)
from bookcatalog.schemas.book import (
    BookCreate,
    BookReplace,
    BookUpdate,
    BookOwner,
    BookResponse,
    DeleteResponse,
)

__all__ = [
    # Auth
    "RegisterRequest",
    "LoginRequest",
    "LoginResponse",
    "UserPublic",
    "TokenPayload",
    # Book
    "BookCreate",
    "BookReplace",
    "BookUpdate",
    "BookOwner",
    "BookResponse",
    "DeleteResponse",
]
