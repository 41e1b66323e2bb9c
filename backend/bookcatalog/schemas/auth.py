"""
Authentication request/response schemas.
"""
from datetime import datetime

from bson import ObjectId
from pydantic import BaseModel, Field, field_validator


class RegisterRequest(BaseModel):
    """Registration request body."""
    username: str = Field(
        ...,
        min_length=6,
        description="Username (min 6 characters, must be unique)"
    )
    password: str = Field(
        ...,
        min_length=8,
        description="User password (min 8 characters)"
    )


class LoginRequest(BaseModel):
    """Login request body."""
    username: str = Field(..., min_length=1, description="Username")
    password: str = Field(..., min_length=1, description="User password")


class LoginResponse(BaseModel):
    """Login response with JWT token."""
    token: str = Field(..., description="JWT bearer token, valid for one hour")


class UserPublic(BaseModel):
    """User information safe to return to clients."""
    id: str = Field(..., description="User ID")
    username: str = Field(..., description="Username")


class TokenPayload(BaseModel):
    """Decoded JWT token payload."""
    sub: str = Field(..., description="Subject (user ID)")
    username: str = Field(..., description="Username")
    exp: datetime = Field(..., description="Expiration time")
    iat: datetime = Field(..., description="Issued at time")

    @field_validator("sub")
    @classmethod
    def sub_is_object_id(cls, value: str) -> str:
        if not ObjectId.is_valid(value):
            raise ValueError("Subject must be a user id")
        return value
