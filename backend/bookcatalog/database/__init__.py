"""
Database module - MongoDB connection, collection names and indexes.
"""
from bookcatalog.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from bookcatalog.database.collections import Collections
from bookcatalog.database.indexes import create_indexes

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "Collections",
    "create_indexes",
]
