"""
User model for the catalog database.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    User document model for the MongoDB users collection.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    username: str = Field(..., description="Unique username")
    hashed_password: str = Field(..., description="Bcrypt hashed password")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Account creation timestamp"
    )

    @classmethod
    def from_document(cls, doc: dict) -> "User":
        """Build a User from a raw MongoDB document."""
        return cls(**{**doc, "_id": str(doc["_id"])})


class Identity(BaseModel):
    """Authenticated identity resolved from a bearer token."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="User ID (token subject)")
    username: str = Field(..., description="Username claim")
