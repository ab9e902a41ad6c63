"""
Auth database configuration.
Stores user identity and credential data.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class Collections:
    """Collection names in the booking database used for auth."""
    USERS = "users"

    # Index definitions for each collection
    INDEXES = {
        "users": [
            {"keys": [("email", 1)], "unique": True},
            {"keys": [("phone", 1)], "unique": True},
        ],
    }


async def create_identity_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create the unique email/phone indexes on the users collection."""
    for collection_name, indexes in Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            try:
                await collection.create_index(keys, **kwargs)
            except PyMongoError as e:
                # Index might already exist with different options
                logger.warning(
                    "Could not create index %s on %s: %s",
                    keys, collection_name, e,
                )
