"""
Service layer for business logic.
"""
from hotel_auth.services.credential_store import CredentialStore

__all__ = [
    "CredentialStore",
]
