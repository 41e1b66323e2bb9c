"""
Authentication router for registration, login and identity lookup.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from motor.motor_asyncio import AsyncIOMotorDatabase

from bookcatalog.config import Settings, get_settings
from bookcatalog.database.connections import get_database
from bookcatalog.dependencies.auth import CurrentIdentity
from bookcatalog.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserPublic,
)
from bookcatalog.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])

REGISTERED_MESSAGE = "User registered successfully"


async def get_auth_service(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(db, settings)


@router.post(
    "/register",
    response_class=PlainTextResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={400: {"description": "Validation error or username already exists"}},
)
async def register(
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user account.

    - **username**: Unique username (minimum 6 characters)
    - **password**: Password (minimum 8 characters)

    No token is issued; call `POST /auth/login` afterwards.
    """
    await auth_service.register_user(body)
    return PlainTextResponse(REGISTERED_MESSAGE, status_code=status.HTTP_201_CREATED)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
    responses={400: {"description": "Validation error or invalid credentials"}},
)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with username and password to receive a JWT token.

    The token expires after one hour and must be sent to protected endpoints
    as `Authorization: Bearer <token>`.
    """
    return await auth_service.login(body)


@router.get(
    "/me",
    response_model=UserPublic,
    summary="Get current identity",
)
async def get_current_identity_info(identity: CurrentIdentity):
    """
    Return the identity carried by the bearer token.

    Requires `Authorization: Bearer <token>`.
    """
    return UserPublic(id=identity.id, username=identity.username)
