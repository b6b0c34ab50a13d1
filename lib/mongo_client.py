# =============================================================================
# lib/mongo_client.py - MongoDB Client Wrapper
# =============================================================================
# This module wraps a pymongo MongoClient for the rest of the application.
# One MongoStore is created at startup and shared by every request:
# - connect() pings the server and creates the unique indexes
# - collection() hands out collections from the configured database
# - ping() backs the readiness endpoint
#
# Usage:
#   from lib.mongo_client import MongoStore
#   store = MongoStore(settings.MONGODB_URI, settings.MONGODB_DB_NAME, indexes=MONGO_INDEXES)
#   store.connect()
#   users = store.collection("users")
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Callable

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.exceptions import StorageConnectionError

# Set up logging for this module
logger = logging.getLogger(__name__)

# Index declarations per collection: {"users": [{"keys": ..., "unique": ..., "name": ...}]}
IndexSpec = dict[str, list[dict[str, Any]]]


class MongoStore:
    """
    Owner of the single MongoDB connection.

    The client factory is injectable so tests can pass mongomock.MongoClient
    instead of a real pymongo client. Indexes are declared by the caller and
    created on connect. Datetimes come back timezone-aware (UTC).

    Example:
        store = MongoStore("mongodb://localhost:27017", "users_api", indexes=MONGO_INDEXES)
        store.connect()
        store.collection("users").find_one({"name": "alice"})
    """

    def __init__(
        self,
        uri: str,
        database_name: str,
        timeout_ms: int = 5000,
        client_factory: Callable[..., Any] = MongoClient,
        indexes: IndexSpec | None = None,
    ):
        self.uri = uri
        self.database_name = database_name
        self.timeout_ms = timeout_ms
        self._client_factory = client_factory
        self.indexes = indexes or {}
        self._client: MongoClient | None = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    @property
    def database(self) -> Database:
        """
        The configured database.

        Raises:
            StorageConnectionError: If connect() has not succeeded yet
        """
        if self._client is None:
            raise StorageConnectionError(
                self.uri,
                "store is not connected",
            )
        return self._client[self.database_name]

    def collection(self, name: str) -> Collection:
        return self.database[name]

    def connect(self) -> None:
        """
        Open the client, confirm the server answers and create indexes.

        There is no retry: the first failure is reported to the caller.

        Raises:
            StorageConnectionError: If the server is unreachable or rejects
                the index creation
        """
        if self._client is not None:
            return

        client = None
        try:
            client = self._client_factory(
                self.uri,
                serverSelectionTimeoutMS=self.timeout_ms,
                tz_aware=True,
            )
            # Send a ping to confirm a successful connection
            client.admin.command("ping")
            self._ensure_indexes(client[self.database_name], self.indexes)
        except PyMongoError as e:
            logger.error(f"Could not connect to MongoDB: {e}")
            if client is not None:
                client.close()
            raise StorageConnectionError(self.uri, str(e)) from e

        self._client = client
        logger.info(f"Connected to MongoDB database '{self.database_name}'")

    def ping(self) -> bool:
        """Return True when the server answers a ping."""
        if self._client is None:
            return False
        try:
            self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")

    @staticmethod
    def _ensure_indexes(database: Database, indexes: IndexSpec) -> None:
        for collection_name, declarations in indexes.items():
            for index in declarations:
                database[collection_name].create_index(index["keys"], unique=index["unique"], name=index["name"])
