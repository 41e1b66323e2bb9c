"""
Book request/response schemas.

Wire field names are camelCase (``publishedYear``, ``addedBy``, ...); the
models accept either spelling and always serialize by alias.
"""
from datetime import date, datetime, timezone
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def current_year() -> int:
    return date.today().year


def _check_published_year(value: int) -> int:
    upper = current_year()
    if not 1 <= value <= upper:
        raise ValueError(f"Published year must be between 1 and {upper}")
    return value


def _check_not_blank(value: str, label: str) -> str:
    if not value:
        raise ValueError(f"{label} is required")
    return value


class BookCreate(BaseModel):
    """Create (and full replace) book request."""
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Book author")
    published_year: int = Field(
        ...,
        alias="publishedYear",
        strict=True,
        description="Year of publication, between 1 and the current year"
    )

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return _check_not_blank(value, "Title")

    @field_validator("author")
    @classmethod
    def author_not_blank(cls, value: str) -> str:
        return _check_not_blank(value, "Author")

    @field_validator("published_year")
    @classmethod
    def published_year_in_range(cls, value: int) -> int:
        return _check_published_year(value)

    def to_fields(self) -> dict[str, Any]:
        """Stored document fields for this request."""
        return self.model_dump(by_alias=True)


class BookReplace(BookCreate):
    """Full replace (PUT) request; same rules as create."""


class BookUpdate(BaseModel):
    """
    Partial update (PATCH) request.

    Every field is optional, but a supplied field must satisfy the same rule
    as on create; an explicit ``null`` is rejected.
    """
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    title: Optional[str] = Field(None, description="Book title")
    author: Optional[str] = Field(None, description="Book author")
    published_year: Optional[int] = Field(
        None,
        alias="publishedYear",
        strict=True,
        description="Year of publication, between 1 and the current year"
    )

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("Title cannot be null")
        return _check_not_blank(value, "Title")

    @field_validator("author")
    @classmethod
    def author_not_blank(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("Author cannot be null")
        return _check_not_blank(value, "Author")

    @field_validator("published_year")
    @classmethod
    def published_year_in_range(cls, value: Optional[int]) -> int:
        if value is None:
            raise ValueError("Published year cannot be null")
        return _check_published_year(value)

    def to_fields(self) -> dict[str, Any]:
        """Only the fields the client actually sent."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class BookOwner(BaseModel):
    """Expanded ``addedBy`` reference."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="User ID")
    username: str = Field(..., description="Username")


class BookResponse(BaseModel):
    """Book record as returned to clients."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Book ID")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Book author")
    published_year: int = Field(..., alias="publishedYear", description="Year of publication")
    added_by: Union[BookOwner, str] = Field(
        ...,
        alias="addedBy",
        description="Owner user ID, or {_id, username} when expanded"
    )
    created_at: Optional[datetime] = Field(None, alias="createdAt", description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt", description="Last update timestamp")

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # MongoDB hands back naive datetimes that are UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class DeleteResponse(BaseModel):
    """Acknowledgement for a deleted book."""
    message: str = Field(default="Book deleted successfully")
