"""
MongoDB connection management.

The application owns one MongoConnection: it is opened when the process
starts, handed to the components that need it, and closed at shutdown.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from hotel_auth.config import Settings

logger = logging.getLogger(__name__)


class MongoConnection:
    """Explicitly owned Motor client with an open/close lifecycle."""

    def __init__(self, uri: str, server_selection_timeout_ms: int = 5000):
        self.uri = uri
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self._client: Optional[AsyncIOMotorClient] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoConnection":
        return cls(
            settings.mongo_uri,
            server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
        )

    @property
    def client(self) -> AsyncIOMotorClient:
        if self._client is None:
            raise RuntimeError("MongoDB connection is not open")
        return self._client

    @property
    def is_open(self) -> bool:
        return self._client is not None

    def open(self) -> AsyncIOMotorClient:
        """Create the Motor client. Calling open() twice is a no-op."""
        if self._client is None:
            self._client = AsyncIOMotorClient(
                self.uri,
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
            )
            logger.info("MongoDB client created")
        return self._client

    def close(self) -> None:
        """Close the Motor client if it is open."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB client closed")

    def database(self, db_name: str) -> AsyncIOMotorDatabase:
        """Get a specific MongoDB database by name."""
        return self.client[db_name]

    async def ping(self) -> None:
        """Round-trip to the server; raises on connectivity failure."""
        await self.client.admin.command("ping")
