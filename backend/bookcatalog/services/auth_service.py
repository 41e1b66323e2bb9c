"""
Authentication service for user registration and login.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from bookcatalog.config import Settings
from bookcatalog.core.errors import DuplicateUsernameError, InvalidCredentialsError
from bookcatalog.core.security import (
    create_access_token,
    dummy_verify,
    hash_password,
    verify_password,
)
from bookcatalog.database.collections import Collections
from bookcatalog.models.user import User
from bookcatalog.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserPublic,
)

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: AsyncIOMotorDatabase, settings: Settings):
        """Initialize with the catalog database and application settings."""
        self.db = db
        self.users_collection = db[Collections.USERS]
        self.settings = settings

    async def register_user(self, request: RegisterRequest) -> UserPublic:
        """
        Register a new user.

        The lookup by username is advisory; the unique index on the users
        collection is authoritative, so a duplicate-key failure on insert is
        reported exactly like a username found by the lookup.

        Args:
            request: Registration request with username and password

        Returns:
            UserPublic with the created user ID

        Raises:
            DuplicateUsernameError: If the username is already taken
        """
        logger.info("Registration attempt for username=%s", request.username)

        existing = await self.users_collection.find_one({"username": request.username})
        if existing:
            logger.warning(
                "Registration failed: username already exists (username=%s)",
                request.username,
            )
            raise DuplicateUsernameError()

        user_doc = {
            "username": request.username,
            "hashed_password": hash_password(request.password),
            "created_at": datetime.now(timezone.utc),
        }

        try:
            result = await self.users_collection.insert_one(user_doc)
        except DuplicateKeyError:
            logger.warning(
                "Registration failed: username already exists (duplicate key, username=%s)",
                request.username,
            )
            raise DuplicateUsernameError()

        logger.info("User registered successfully (username=%s)", request.username)
        return UserPublic(id=str(result.inserted_id), username=request.username)

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Authenticate user and return JWT token.

        An unknown username and a wrong password fail with the same error.

        Args:
            request: Login request with username and password

        Returns:
            LoginResponse with JWT token

        Raises:
            InvalidCredentialsError: If credentials are invalid
        """
        logger.info("Login attempt for username=%s", request.username)

        user = await self.get_user_by_username(request.username)

        if user is None:
            dummy_verify()
            logger.warning("Login failed: invalid credentials (username=%s)", request.username)
            raise InvalidCredentialsError()

        if not verify_password(request.password, user.hashed_password):
            logger.warning("Login failed: invalid credentials (username=%s)", request.username)
            raise InvalidCredentialsError()

        token = create_access_token(
            user_id=user.id,
            username=user.username,
            settings=self.settings,
        )

        logger.info("User logged in successfully (username=%s)", user.username)
        return LoginResponse(token=token)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username.

        Args:
            username: Username to look up

        Returns:
            User model or None if not found
        """
        user_doc = await self.users_collection.find_one({"username": username})

        if not user_doc:
            return None

        return User.from_document(user_doc)
