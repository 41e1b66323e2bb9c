"""
Authentication dependencies for route protection.
"""
import logging
from typing import Annotated

from fastapi import Depends, Request
from pydantic import ValidationError as PydanticValidationError

from bookcatalog.config import Settings, get_settings
from bookcatalog.core.errors import (
    InvalidTokenError,
    MalformedTokenError,
    MissingTokenError,
)
from bookcatalog.core.security import JWTError, decode_token
from bookcatalog.models.user import Identity
from bookcatalog.schemas.auth import TokenPayload

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


async def get_current_identity(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> Identity:
    """
    Dependency resolving the caller's identity from the Authorization header.

    Header format: ``Authorization: Bearer <token>``. Verification is purely
    cryptographic; the store is never consulted.

    Raises:
        MissingTokenError (401): No Authorization header
        MalformedTokenError (401): Header does not use the Bearer scheme
        InvalidTokenError (403): Bad signature, expired, or incomplete claims
    """
    auth_header = request.headers.get("Authorization")

    if auth_header is None:
        logger.warning("No Authorization header provided")
        raise MissingTokenError()

    if not auth_header.startswith(BEARER_PREFIX):
        logger.warning("Invalid Authorization header format")
        raise MalformedTokenError()

    token = auth_header[len(BEARER_PREFIX):].strip()

    try:
        payload = TokenPayload(**decode_token(token, settings))
    except (JWTError, PydanticValidationError) as e:
        logger.warning("Token verification failed: %s", e)
        raise InvalidTokenError()

    identity = Identity(id=payload.sub, username=payload.username)

    # Only read by the error handlers when logging request context
    request.state.actor = identity.username

    return identity


# Type alias for cleaner route signatures
CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
