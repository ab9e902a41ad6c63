"""
Core module - Password security and the error taxonomy.
"""
from hotel_auth.core.security import (
    hash_password,
    verify_password,
    is_password_hash,
    verify_legacy_password,
    dummy_verify,
)
from hotel_auth.core.exceptions import (
    ErrorKind,
    AuthError,
    ValidationError,
    DuplicateIdentityError,
    InvalidCredentialsError,
    StoreUnavailableError,
    UniqueViolationError,
    IdentityNotFoundError,
)

__all__ = [
    "hash_password",
    "verify_password",
    "is_password_hash",
    "verify_legacy_password",
    "dummy_verify",
    "ErrorKind",
    "AuthError",
    "ValidationError",
    "DuplicateIdentityError",
    "InvalidCredentialsError",
    "StoreUnavailableError",
    "UniqueViolationError",
    "IdentityNotFoundError",
]
