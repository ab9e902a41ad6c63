"""
Security utilities for password hashing and verification.

Two credential formats coexist in the users collection: bcrypt hashes
(canonical) and raw secrets imported from earlier data (legacy).
"""
import hmac

from passlib.context import CryptContext

from hotel_auth.config import get_settings

# Password hashing context using bcrypt
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().password_hash_rounds,
)


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def is_password_hash(stored: str) -> bool:
    """Return True if the stored value is a hash this context can verify."""
    return pwd_context.identify(stored, required=False) is not None


def verify_legacy_password(plain_password: str, stored_password: str) -> bool:
    """
    Compare a plain password with a legacy (unhashed) stored value.

    Comparison runs in constant time over the UTF-8 bytes.
    """
    return hmac.compare_digest(
        plain_password.encode("utf-8"),
        stored_password.encode("utf-8"),
    )


def dummy_verify() -> None:
    """Spend the time of one hash verification without checking anything."""
    pwd_context.dummy_verify()
