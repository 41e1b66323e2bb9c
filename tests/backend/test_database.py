"""
Tests for database connections and initialization.

These tests cover:
- MongoDB connection initialization
- Index creation
"""

import pytest
from unittest.mock import MagicMock, patch


class TestMongoDBConnection:
    """Tests for MongoDB connection handling."""

    @pytest.mark.asyncio
    async def test_get_mongo_client_creates_connection(self):
        """get_mongo_client should create connection on first call."""
        import bookcatalog.database.connections as conn_module

        with patch("bookcatalog.database.connections.AsyncIOMotorClient") as mock_client, \
             patch("bookcatalog.database.connections.get_settings") as mock_settings:

            mock_settings.return_value.mongo_uri = "mongodb://test:27017"
            mock_instance = MagicMock()
            mock_client.return_value = mock_instance

            conn_module._mongo_client = None

            client = await conn_module.get_mongo_client()
            again = await conn_module.get_mongo_client()

            mock_client.assert_called_once_with("mongodb://test:27017")
            assert client is mock_instance
            assert again is mock_instance

        conn_module._mongo_client = None

    @pytest.mark.asyncio
    async def test_close_connections_cleans_up(self):
        """close_connections should close and forget the client."""
        import bookcatalog.database.connections as conn_module

        mock_mongo = MagicMock()
        conn_module._mongo_client = mock_mongo

        await conn_module.close_connections()

        mock_mongo.close.assert_called_once()
        assert conn_module._mongo_client is None

    @pytest.mark.asyncio
    async def test_get_database_uses_configured_name(self, test_settings, mock_async_mongo_client):
        import bookcatalog.database.connections as conn_module

        conn_module._mongo_client = mock_async_mongo_client
        try:
            db = await conn_module.get_database()
        finally:
            conn_module._mongo_client = None

        assert db.name == test_settings.mongo_db_name


class TestIndexCreation:
    """Tests for index creation on collections."""

    @pytest.mark.asyncio
    async def test_users_collection_has_unique_username_index(self, mock_db):
        indexes = await mock_db.users.index_information()

        username_indexes = [
            idx for idx in indexes.values() if idx["key"] == [("username", 1)]
        ]
        assert len(username_indexes) == 1
        assert username_indexes[0].get("unique") is True

    @pytest.mark.asyncio
    async def test_books_collection_indexes_owner(self, mock_db):
        indexes = await mock_db.books.index_information()

        assert any("addedBy" in str(idx) for idx in indexes.values())
