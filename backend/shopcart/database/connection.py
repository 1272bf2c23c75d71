"""
MongoDB connection and Beanie ODM initialization.

This module provides:
- MongoConnection: one explicitly constructed client handle per process
- Beanie ODM initialization on connect
- Health check utilities
"""

import logging
from typing import List, Optional, Type

from beanie import Document, init_beanie
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from shopcart.config import Settings
from shopcart.exceptions import DatabaseNotConnectedError

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    Single connection to the document store.

    connect() is called once at startup. A failure is logged and leaves the
    handle un-connected; nothing is retried.
    """

    def __init__(
        self,
        settings: Settings,
        document_models: Optional[List[Type[Document]]] = None,
    ):
        self.settings = settings
        self._document_models = document_models
        self._client: Optional[AsyncMongoClient] = None
        self._database: Optional[AsyncDatabase] = None

    @property
    def is_connected(self) -> bool:
        return self._database is not None

    @property
    def database(self) -> AsyncDatabase:
        """
        Get the MongoDB database instance.
        """
        if self._database is None:
            raise DatabaseNotConnectedError()
        return self._database

    @property
    def database_name(self) -> str:
        if self._database is not None:
            return self._database.name
        return self.settings.mongodb_database

    async def connect(self) -> bool:
        """
        Open the client, ping the server and initialize Beanie.

        Returns True on success. On failure the error is logged and the
        handle stays un-connected.
        """
        if self.is_connected:
            logger.warning("connect() called on an open connection, ignoring")
            return True

        url = sanitize_mongodb_url(self.settings.mongodb_uri)
        client: Optional[AsyncMongoClient] = None

        try:
            client = AsyncMongoClient(
                self.settings.mongodb_uri,
                serverSelectionTimeoutMS=self.settings.server_selection_timeout_ms,
            )
            await client.admin.command("ping")

            database = client.get_default_database(
                default=self.settings.mongodb_database
            )
            await init_beanie(
                database=database,
                document_models=self._get_document_models(),
            )
        except (PyMongoError, ValueError) as e:
            # pymongo reports some malformed URIs (e.g. a bad port) as ValueError
            logger.error(f"Error connecting to MongoDB at {url}: {e}")
            if client is not None:
                await client.close()
            return False

        self._client = client
        self._database = database
        logger.info(f"Connected to MongoDB at {url} (database: {database.name})")
        return True

    async def close(self) -> None:
        """
        Close MongoDB connection.
        """
        if self._client is not None:
            await self._client.close()
            logger.info("Closed MongoDB connection")
        self._client = None
        self._database = None

    async def check_connection(self) -> bool:
        """
        Check if MongoDB connection is healthy.
        """
        if self._client is None:
            return False

        try:
            await self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    def info(self) -> dict:
        """
        Get database connection information and status.
        """
        return {
            "status": "connected" if self.is_connected else "disconnected",
            "url": sanitize_mongodb_url(self.settings.mongodb_uri),
            "database": self.database_name,
        }

    def _get_document_models(self) -> List[Type[Document]]:
        if self._document_models is not None:
            return self._document_models

        # Imported here to avoid a cycle with the models package
        from shopcart.models import get_document_models

        return get_document_models()


def sanitize_mongodb_url(url: str) -> str:
    """
    Hide password in MongoDB URL for safe logging.
    """
    if "@" not in url:
        return url

    # Handle mongodb+srv:// or mongodb://
    if "://" in url:
        protocol, rest = url.split("://", 1)
        if "@" in rest:
            credentials, host = rest.rsplit("@", 1)
            if ":" in credentials:
                username = credentials.split(":", 1)[0]
                return f"{protocol}://{username}:***@{host}"
    return url
