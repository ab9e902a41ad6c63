"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with the identity store, the
credential service and app helpers for route tests.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio


# =============================================================================
# Store and Service Fixtures
# =============================================================================

@pytest.fixture
def identity_store(users_collection):
    """MongoIdentityStore over the mock users collection."""
    from hotel_auth.database.identity_store import MongoIdentityStore

    return MongoIdentityStore(users_collection)


@pytest.fixture
def credential_store(identity_store):
    """CredentialStore wired to the mock identity store."""
    from hotel_auth.services.credential_store import CredentialStore

    return CredentialStore(identity_store)


@pytest.fixture
def failing_collection():
    """
    A users collection whose every operation is an AsyncMock.

    Configure side effects per test:

        failing_collection.find_one.side_effect = ServerSelectionTimeoutError("...")
    """
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock()
    return collection


@pytest.fixture
def mock_credential_store():
    """
    Create a fully mocked CredentialStore.

    All methods are AsyncMock, allowing you to configure return values:

        mock_credential_store.authenticate.return_value = AuthResult.ok(...)
    """
    service = MagicMock()
    service.signup = AsyncMock()
    service.authenticate = AsyncMock()
    return service


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def client_with_mock_service(mock_credential_store):
    """
    TestClient whose routes use mock_credential_store.

    The lifespan is not run, so no database connection is opened.
    """
    from fastapi.testclient import TestClient

    from hotel_auth.main import app
    from hotel_auth.routers.auth import get_credential_store

    app.dependency_overrides[get_credential_store] = lambda: mock_credential_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def app_with_mock_db(mock_async_mongo_client):
    """
    Run the real app lifespan against the mongomock-motor client.

    The Motor client class is patched so MongoConnection.open() returns
    the in-memory client.
    """
    from hotel_auth.main import app, lifespan

    with patch(
        "hotel_auth.database.connections.AsyncIOMotorClient",
        return_value=mock_async_mongo_client,
    ):
        async with lifespan(app):
            yield app


@pytest_asyncio.fixture
async def async_client(app_with_mock_db):
    """Async HTTP client bound to the app started against mock MongoDB."""
    from httpx import ASGITransport, AsyncClient

    async with AsyncClient(
        transport=ASGITransport(app=app_with_mock_db),
        base_url="http://test"
    ) as ac:
        yield ac


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in data["detail"].lower()
    return _assert
