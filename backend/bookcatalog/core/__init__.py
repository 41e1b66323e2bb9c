"""
Core module - Security, error taxonomy and logging setup.
"""
from bookcatalog.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
)
from bookcatalog.core.errors import (
    ApiError,
    ValidationError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    MissingTokenError,
    MalformedTokenError,
    InvalidTokenError,
    InvalidIdError,
    NotFoundError,
    ForbiddenError,
    InternalError,
    register_exception_handlers,
)

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "ApiError",
    "ValidationError",
    "DuplicateUsernameError",
    "InvalidCredentialsError",
    "MissingTokenError",
    "MalformedTokenError",
    "InvalidTokenError",
    "InvalidIdError",
    "NotFoundError",
    "ForbiddenError",
    "InternalError",
    "register_exception_handlers",
]
