"""
Database module - MongoDB connection, identity store and database definitions.
"""
from hotel_auth.database.connections import MongoConnection
from hotel_auth.database.identity_store import (
    MongoIdentityStore,
    identifier_predicate,
    email_or_phone_predicate,
)
from hotel_auth.database.databases import auth_db

__all__ = [
    "MongoConnection",
    "MongoIdentityStore",
    "identifier_predicate",
    "email_or_phone_predicate",
    "auth_db",
]
