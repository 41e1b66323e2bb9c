"""
Index management.
Ensures the indexes the workflows rely on exist on startup.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase

from bookcatalog.database.collections import Collections


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create necessary indexes for the catalog database."""

    # The unique username index is the authoritative uniqueness guard
    await db[Collections.USERS].create_index("username", unique=True)

    await db[Collections.BOOKS].create_index("addedBy")
