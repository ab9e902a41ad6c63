"""
Global test fixtures for the hotel booking auth backend.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Identity documents in both credential formats
- Signup payloads
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
import pytest_asyncio
from bson import ObjectId
from mongomock_motor import AsyncMongoMockClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes, including unique indexes.
    """
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_booking_db(mock_async_mongo_client):
    """Provide mock booking database with the users indexes in place."""
    from hotel_auth.database.databases.auth_db import create_identity_indexes

    db = mock_async_mongo_client["hotel_booking"]
    await create_identity_indexes(db)
    yield db


@pytest.fixture
def users_collection(mock_booking_db):
    """The users collection of the mock booking database."""
    return mock_booking_db["users"]


# =============================================================================
# Identity Fixtures
# =============================================================================

@pytest.fixture
def signup_data() -> dict:
    """Valid signup payload."""
    return {
        "phone": "9990001111",
        "name": "A",
        "email": "a@x.com",
        "password": "p@ss1",
    }


@pytest.fixture
def legacy_user() -> dict:
    """An imported user document whose password is stored in plaintext."""
    return {
        "_id": ObjectId("507f1f77bcf86cd799439011"),
        "phone": "9990002222",
        "name": "Legacy Guest",
        "email": "legacy@example.com",
        "password": "secret123",
        "createdAt": datetime(2023, 5, 1, tzinfo=timezone.utc),
    }


@pytest.fixture
def canonical_user() -> dict:
    """A user document with a bcrypt password hash."""
    from hotel_auth.core.security import hash_password

    return {
        "_id": ObjectId("507f1f77bcf86cd799439022"),
        "phone": "9990003333",
        "name": "Hashed Guest",
        "email": "hashed@example.com",
        "password": hash_password("CorrectHorse1"),
        "createdAt": datetime(2024, 1, 15, tzinfo=timezone.utc),
    }
