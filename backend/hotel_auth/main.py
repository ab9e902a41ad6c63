"""
Hotel booking auth backend - FastAPI application

Signup and login for the hotel booking site, with transparent upgrade of
legacy plaintext credentials to bcrypt hashes.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hotel_auth.config import get_settings
from hotel_auth.database.connections import MongoConnection
from hotel_auth.database.databases.auth_db import create_identity_indexes
from hotel_auth.database.identity_store import MongoIdentityStore
from hotel_auth.routers import auth, health
from hotel_auth.services.credential_store import CredentialStore

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger("hotel_auth")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Open the MongoDB connection
    - Create unique indexes on the users collection
    - Build the credential service on top of the connection

    Shutdown:
    - Close the MongoDB connection
    """
    logger.info("Starting up hotel booking auth backend...")

    connection = MongoConnection.from_settings(settings)
    connection.open()
    db = connection.database(settings.mongo_db_name)
    await create_identity_indexes(db)

    app.state.mongo = connection
    app.state.credential_store = CredentialStore(MongoIdentityStore.from_database(db))
    logger.info("Credential service ready (database=%s)", settings.mongo_db_name)

    yield

    logger.info("Shutting down hotel booking auth backend...")
    connection.close()


# Create FastAPI application
app = FastAPI(
    title="Hotel Booking Auth API",
    description="""
## Hotel booking authentication API

- **Signup**: create an account keyed by a unique email and phone number
- **Login**: authenticate with either the email or the phone number

Accounts imported with plaintext passwords are upgraded to bcrypt hashes
on their first successful login.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(auth.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Hotel Booking Auth API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
