# =============================================================================
# lib/mongodb_client.py - MongoDB Connection Wrapper
# =============================================================================
# This module owns the process-wide MongoDB connection and its lifecycle
# state. The rest of the application only reads the state through the
# properties below; connect() and disconnect() are called by the bootstrap
# sequence and the shutdown hook.
#
# Usage:
#   from lib.mongodb_client import mongodb
#   await mongodb.connect()
#   products = mongodb.database["products"]
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Callable

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from app.config import settings
from core.models.status import ConnectionState
from lib.utils import DependencyConnectionError

# Set up logging for this module
logger = logging.getLogger(__name__)


class DatabaseConnectionError(DependencyConnectionError):
    """Error while connecting to, or using, the MongoDB connection."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault(
            "suggestion",
            "Check MONGODB_URI in your .env file and that the server is reachable",
        )
        super().__init__(message, code="DATABASE_CONNECTION_FAILED", **kwargs)


class MongoDBConnection:
    """
    Lifecycle wrapper around a single AsyncMongoClient.

    The state codes follow ConnectionState. Reads of ready_state,
    database_name and host never raise and never touch the network, so
    they are safe to call from any request at any time, including before
    connect() has finished.

    Example:
        connection = MongoDBConnection("mongodb://localhost:27017", "e-commerce")
        await connection.connect()
        connection.ready_state      # 1
        connection.database_name    # "e-commerce"
    """

    def __init__(
        self,
        uri: str,
        db_name: str,
        client_factory: Callable[..., Any] = AsyncMongoClient,
    ):
        self._uri = uri
        self._db_name = db_name
        self._client_factory = client_factory
        self._client: Any = None
        self._database: Any = None
        self._host: str | None = None
        self._state = ConnectionState.DISCONNECTED

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def ready_state(self) -> int:
        """Raw numeric connection state."""
        return int(self._state)

    @property
    def database_name(self) -> str | None:
        """Name of the active database, None until connected."""
        if self._database is None:
            return None
        return self._database.name

    @property
    def host(self) -> str | None:
        """Host of the server the client talks to, None until connected."""
        return self._host

    @property
    def database(self) -> Any:
        """
        The active database handle for collection access.

        Raises:
            DatabaseConnectionError: If connect() has not completed
        """
        if self._database is None:
            raise DatabaseConnectionError("MongoDB is not connected")
        return self._database

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def connect(self) -> None:
        """
        Open the client and verify the server answers a ping.

        Raises:
            DatabaseConnectionError: If the client cannot be created or the
                server does not respond
        """
        if self._state == ConnectionState.CONNECTED:
            logger.debug("MongoDB already connected, skipping")
            return

        self._state = ConnectionState.CONNECTING
        try:
            self._client = self._client_factory(self._uri)
            await self._client.admin.command("ping")
            database = self._client.get_default_database(default=self._db_name)
            self._host = self._resolve_host(self._client)
        except (PyMongoError, ValueError, TypeError) as e:
            await self._reset()
            raise DatabaseConnectionError(
                f"Failed to connect to MongoDB: {e}",
                details={"db_name": self._db_name},
            ) from e

        self._database = database
        self._state = ConnectionState.CONNECTED
        logger.info(f"MongoDB connection established: {self._host}/{database.name}")

    async def disconnect(self) -> None:
        """Close the client. Safe to call when never connected."""
        if self._client is None:
            self._state = ConnectionState.DISCONNECTED
            return

        self._state = ConnectionState.DISCONNECTING
        try:
            await self._client.close()
        finally:
            self._client = None
            self._database = None
            self._host = None
            self._state = ConnectionState.DISCONNECTED
        logger.info("MongoDB connection closed")

    async def _reset(self) -> None:
        client, self._client = self._client, None
        self._database = None
        self._host = None
        self._state = ConnectionState.DISCONNECTED
        if client is not None:
            try:
                await client.close()
            except PyMongoError as e:
                logger.warning(f"Error closing failed MongoDB client: {e}")

    @staticmethod
    def _resolve_host(client: Any) -> str | None:
        # nodes is a snapshot of the topology, no server selection involved
        nodes = sorted(client.nodes)
        return nodes[0][0] if nodes else None


# Process-wide connection
mongodb = MongoDBConnection(settings.MONGODB_URI, settings.MONGODB_DB_NAME)
