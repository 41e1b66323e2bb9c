"""
Book model for the catalog database.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """
    Book document model for the MongoDB books collection.

    Field aliases follow the stored (and wire) document keys.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="MongoDB ObjectId as string")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Book author")
    published_year: int = Field(..., alias="publishedYear", description="Year of publication")
    added_by: str = Field(..., alias="addedBy", description="Owner user ID")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    @classmethod
    def from_document(cls, doc: dict) -> "Book":
        """Build a Book from a raw MongoDB document."""
        return cls(
            **{
                **doc,
                "_id": str(doc["_id"]),
                "addedBy": str(doc["addedBy"]),
            }
        )

    def is_owned_by(self, user_id: str) -> bool:
        return self.added_by == user_id
