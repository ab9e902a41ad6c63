"""
Identity store backed by the MongoDB users collection.

Exposes the three operations the credential service needs and
translates driver errors into the service's error taxonomy.
"""
import logging
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from hotel_auth.core.exceptions import (
    IdentityNotFoundError,
    StoreUnavailableError,
    UniqueViolationError,
)
from hotel_auth.database.databases import auth_db

logger = logging.getLogger(__name__)


def identifier_predicate(identifier: str) -> dict[str, Any]:
    """Match an identity whose email or phone equals the identifier."""
    return {"$or": [{"email": identifier.lower()}, {"phone": identifier}]}


def email_or_phone_predicate(email: str, phone: str) -> dict[str, Any]:
    """Match an identity that collides on either email or phone."""
    return {"$or": [{"email": email}, {"phone": phone}]}


class MongoIdentityStore:
    """Data access for identity documents."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    @classmethod
    def from_database(cls, db: AsyncIOMotorDatabase) -> "MongoIdentityStore":
        return cls(db[auth_db.Collections.USERS])

    async def find_one(self, predicate: dict[str, Any]) -> Optional[dict[str, Any]]:
        """
        Return at most one identity document matching the predicate.

        Raises:
            StoreUnavailableError: If the store cannot be reached
        """
        try:
            return await self.collection.find_one(predicate)
        except PyMongoError as e:
            raise self._unavailable("find_one", e) from e

    async def insert(self, document: dict[str, Any]) -> str:
        """
        Insert a new identity document.

        Returns:
            The inserted document id as a string

        Raises:
            UniqueViolationError: If email or phone already exists
            StoreUnavailableError: If the store cannot be reached
        """
        try:
            result = await self.collection.insert_one(dict(document))
        except DuplicateKeyError as e:
            raise UniqueViolationError(str(e)) from e
        except PyMongoError as e:
            raise self._unavailable("insert", e) from e
        return str(result.inserted_id)

    async def update_credential(self, identity_id: Any, credential: str) -> None:
        """
        Overwrite the credential of a single identity.

        Args:
            identity_id: The document ``_id`` exactly as loaded from the store
            credential: New credential value

        Raises:
            IdentityNotFoundError: If no document has this ``_id``
            StoreUnavailableError: If the store cannot be reached
        """
        try:
            result = await self.collection.update_one(
                {"_id": identity_id},
                {"$set": {"password": credential}},
            )
        except PyMongoError as e:
            raise self._unavailable("update_credential", e) from e

        if result.matched_count == 0:
            raise IdentityNotFoundError(f"No identity with _id {identity_id!r}")

    @staticmethod
    def _unavailable(operation: str, error: PyMongoError) -> StoreUnavailableError:
        logger.error("Identity store %s failed: %s", operation, error)
        return StoreUnavailableError()
