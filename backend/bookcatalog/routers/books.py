"""
Books router for catalog CRUD.

Reads are public; every mutation requires a bearer token and is limited to
the book's owner.
"""
from typing import Annotated, Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from bookcatalog.database.connections import get_database
from bookcatalog.dependencies.auth import CurrentIdentity
from bookcatalog.schemas.book import (
    BookCreate,
    BookReplace,
    BookResponse,
    BookUpdate,
    DeleteResponse,
)
from bookcatalog.services.book_service import BookService

router = APIRouter(prefix="/books", tags=["Books"])

ExpandParam = Annotated[
    Optional[Literal["addedBy"]],
    Query(description="Set to `addedBy` to expand the owner into {_id, username}"),
]


async def get_book_service(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)],
) -> BookService:
    """Dependency to get BookService instance."""
    return BookService(db)


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create book",
)
async def create_book(
    body: BookCreate,
    identity: CurrentIdentity,
    book_service: BookService = Depends(get_book_service),
):
    """
    Add a book to the catalog. The caller becomes its owner.

    - **title**: Book title (required)
    - **author**: Book author (required)
    - **publishedYear**: Integer between 1 and the current year

    Requires `Authorization: Bearer <token>`.
    """
    return await book_service.create_book(identity, body)


@router.get(
    "",
    response_model=list[BookResponse],
    summary="List books",
)
async def list_books(
    expand: ExpandParam = None,
    book_service: BookService = Depends(get_book_service),
):
    """List every book in the catalog."""
    return await book_service.list_books(expand=expand is not None)


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get book",
)
async def get_book(
    book_id: str,
    expand: ExpandParam = None,
    book_service: BookService = Depends(get_book_service),
):
    """Get a single book by ID."""
    return await book_service.get_book(book_id, expand=expand is not None)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Replace book",
)
async def replace_book(
    book_id: str,
    body: BookReplace,
    identity: CurrentIdentity,
    book_service: BookService = Depends(get_book_service),
):
    """
    Overwrite title, author and publishedYear of a book you added.

    Requires `Authorization: Bearer <token>`.
    """
    return await book_service.replace_book(identity, book_id, body)


@router.patch(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update book",
)
async def update_book(
    book_id: str,
    body: BookUpdate,
    identity: CurrentIdentity,
    book_service: BookService = Depends(get_book_service),
):
    """
    Update only the supplied fields of a book you added.

    Requires `Authorization: Bearer <token>`.
    """
    return await book_service.update_book(identity, book_id, body)


@router.delete(
    "/{book_id}",
    response_model=DeleteResponse,
    summary="Delete book",
)
async def delete_book(
    book_id: str,
    identity: CurrentIdentity,
    book_service: BookService = Depends(get_book_service),
):
    """
    Delete a book you added.

    **Warning**: This action cannot be undone.

    Requires `Authorization: Bearer <token>`.
    """
    return await book_service.delete_book(identity, book_id)
