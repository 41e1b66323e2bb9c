"""
Book service for ownership-scoped catalog management.

Every mutating operation follows the same order: validate the id format,
check the record exists, check the acting user owns it, then write. A
non-owner touching a missing record therefore sees ``NotFoundError``.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from bookcatalog.core.errors import ForbiddenError, InvalidIdError, NotFoundError
from bookcatalog.database.collections import Collections
from bookcatalog.models.book import Book
from bookcatalog.models.user import Identity
from bookcatalog.schemas.book import (
    BookCreate,
    BookOwner,
    BookResponse,
    BookUpdate,
    DeleteResponse,
)

logger = logging.getLogger(__name__)

UPDATE_FORBIDDEN = "You can only update books you added"
DELETE_FORBIDDEN = "You can only delete books you added"


def _now() -> datetime:
    # BSON dates keep millisecond precision
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class BookService:
    """Service for book CRUD operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the catalog database."""
        self.db = db
        self.books = db[Collections.BOOKS]
        self.users = db[Collections.USERS]

    # ==================== Reads ====================

    async def list_books(self, expand: bool = False) -> list[BookResponse]:
        """List every book in the catalog."""
        cursor = self.books.find({})
        docs = await cursor.to_list(length=None)

        owners = await self._load_owners(docs) if expand else {}
        return [self._to_response(doc, owners) for doc in docs]

    async def get_book(self, book_id: str, expand: bool = False) -> BookResponse:
        """
        Get a book by ID.

        Raises:
            InvalidIdError: If book_id is not a valid ObjectId
            NotFoundError: If no book has this ID
        """
        oid = self._parse_id(book_id)
        doc = await self.books.find_one({"_id": oid})
        if not doc:
            raise NotFoundError()

        owners = await self._load_owners([doc]) if expand else {}
        return self._to_response(doc, owners)

    # ==================== Writes ====================

    async def create_book(self, identity: Identity, request: BookCreate) -> BookResponse:
        """Create a book owned by the acting user."""
        now = _now()
        book_doc = {
            **request.to_fields(),
            "addedBy": ObjectId(identity.id),
            "createdAt": now,
            "updatedAt": now,
        }

        result = await self.books.insert_one(book_doc)
        book_doc["_id"] = result.inserted_id

        logger.info("Book %s created by %s", result.inserted_id, identity.username)
        return self._to_response(book_doc)

    async def replace_book(
        self, identity: Identity, book_id: str, request: BookCreate
    ) -> BookResponse:
        """
        Overwrite title, author and publishedYear of an owned book (PUT).

        Raises:
            InvalidIdError, NotFoundError, ForbiddenError
        """
        oid = self._parse_id(book_id)
        await self._get_owned_book(identity, oid, UPDATE_FORBIDDEN)

        doc = await self._apply_update(identity, oid, request.to_fields())
        logger.info("Book %s replaced by %s", book_id, identity.username)
        return self._to_response(doc)

    async def update_book(
        self, identity: Identity, book_id: str, request: BookUpdate
    ) -> BookResponse:
        """
        Merge the supplied fields into an owned book (PATCH).

        Raises:
            InvalidIdError, NotFoundError, ForbiddenError
        """
        oid = self._parse_id(book_id)
        await self._get_owned_book(identity, oid, UPDATE_FORBIDDEN)

        doc = await self._apply_update(identity, oid, request.to_fields())
        logger.info("Book %s updated by %s", book_id, identity.username)
        return self._to_response(doc)

    async def delete_book(self, identity: Identity, book_id: str) -> DeleteResponse:
        """
        Delete an owned book.

        Raises:
            InvalidIdError, NotFoundError, ForbiddenError
        """
        oid = self._parse_id(book_id)
        await self._get_owned_book(identity, oid, DELETE_FORBIDDEN)

        result = await self.books.delete_one({"_id": oid})
        if result.deleted_count == 0:
            # Removed by a concurrent request after the ownership check
            raise NotFoundError()

        logger.info("Book %s deleted by %s", book_id, identity.username)
        return DeleteResponse()

    # ==================== Helpers ====================

    @staticmethod
    def _parse_id(book_id: str) -> ObjectId:
        if not ObjectId.is_valid(book_id):
            raise InvalidIdError()
        return ObjectId(book_id)

    async def _get_owned_book(
        self, identity: Identity, oid: ObjectId, forbidden_message: str
    ) -> Book:
        """Existence check first, ownership second."""
        doc = await self.books.find_one({"_id": oid})
        if not doc:
            raise NotFoundError()

        book = Book.from_document(doc)
        if not book.is_owned_by(identity.id):
            logger.warning(
                "User %s attempted to modify book %s owned by %s",
                identity.username,
                book.id,
                book.added_by,
            )
            raise ForbiddenError(forbidden_message)

        return book

    async def _apply_update(
        self, identity: Identity, oid: ObjectId, fields: dict
    ) -> dict:
        """Write fields, re-stamping the owner and updatedAt; last writer wins."""
        update = {
            **fields,
            "addedBy": ObjectId(identity.id),
            "updatedAt": _now(),
        }

        doc = await self.books.find_one_and_update(
            {"_id": oid},
            {"$set": update},
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            raise NotFoundError()
        return doc

    async def _load_owners(self, docs: list[dict]) -> dict[str, BookOwner]:
        """Fetch {_id, username} for every distinct owner referenced by docs."""
        owner_ids = list({doc["addedBy"] for doc in docs if doc.get("addedBy") is not None})
        if not owner_ids:
            return {}

        cursor = self.users.find({"_id": {"$in": owner_ids}}, {"username": 1})
        users = await cursor.to_list(length=None)
        return {
            str(user["_id"]): BookOwner(id=str(user["_id"]), username=user["username"])
            for user in users
        }

    @staticmethod
    def _to_response(
        doc: dict, owners: Optional[dict[str, BookOwner]] = None
    ) -> BookResponse:
        book = Book.from_document(doc)
        added_by = (owners or {}).get(book.added_by, book.added_by)

        return BookResponse(
            id=book.id,
            title=book.title,
            author=book.author,
            published_year=book.published_year,
            added_by=added_by,
            created_at=book.created_at,
            updated_at=book.updated_at,
        )
