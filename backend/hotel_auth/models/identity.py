"""
Identity model for the users collection.

Documents keep the field layout written by the booking application
(``password``, ``createdAt``) so imported records load unchanged.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from hotel_auth.core.security import is_password_hash


def _as_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


class CredentialFormat(str, Enum):
    """Storage format of a credential."""
    LEGACY = "legacy"
    CANONICAL = "canonical"


class Credential(BaseModel):
    """
    A stored credential tagged with its format.

    The format is detected once, when the document is loaded.
    """
    format: CredentialFormat
    value: str = Field(..., repr=False)

    @classmethod
    def from_stored(cls, stored: Any) -> Optional["Credential"]:
        """Classify a stored credential value; empty values yield None."""
        if stored is None or stored == "":
            return None
        stored = _as_text(stored)
        if is_password_hash(stored):
            return cls(format=CredentialFormat.CANONICAL, value=stored)
        return cls(format=CredentialFormat.LEGACY, value=stored)

    @property
    def is_canonical(self) -> bool:
        return self.format == CredentialFormat.CANONICAL


class IdentityPublic(BaseModel):
    """Identity fields safe to return to callers (no credential)."""
    id: str = Field(..., alias="_id", description="MongoDB ObjectId as string")
    phone: Optional[str] = Field(None, description="Unique phone number")
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Unique email address")
    created_at: Optional[datetime] = Field(
        None,
        alias="createdAt",
        description="Account creation timestamp"
    )

    class Config:
        populate_by_name = True


class Identity(IdentityPublic):
    """
    User document model for the users collection.
    """
    credential: Optional[Credential] = Field(
        None,
        description="Stored credential, legacy or canonical"
    )
    document_id: Any = Field(
        None,
        exclude=True,
        repr=False,
        description="Raw _id as stored, used to address the document on update"
    )

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Identity":
        """
        Build an Identity from a raw MongoDB document.

        Imported records may hold numbers where strings are expected
        (spreadsheet phone columns), so text fields are coerced.
        """
        return cls(
            id=str(document["_id"]),
            document_id=document["_id"],
            phone=_as_text(document.get("phone")),
            name=_as_text(document.get("name")),
            email=_as_text(document.get("email")),
            credential=Credential.from_stored(document.get("password")),
            created_at=document.get("createdAt"),
        )

    def to_public(self) -> IdentityPublic:
        """Drop the credential."""
        return IdentityPublic(
            id=self.id,
            phone=self.phone,
            name=self.name,
            email=self.email,
            created_at=self.created_at,
        )
