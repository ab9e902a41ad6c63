"""
Pydantic models for database documents.
"""
from hotel_auth.models.identity import (
    Credential,
    CredentialFormat,
    Identity,
    IdentityPublic,
)

__all__ = [
    "Credential",
    "CredentialFormat",
    "Identity",
    "IdentityPublic",
]
