"""
Error taxonomy for signup and authentication.

Errors are raised inside the credential service and converted into
typed results at its public methods, so callers never see them as
exceptions.
"""
from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of failure reported to callers."""
    VALIDATION = "validation_error"
    DUPLICATE_IDENTITY = "duplicate_identity"
    INVALID_CREDENTIALS = "invalid_credentials"
    STORE_UNAVAILABLE = "store_unavailable"


class AuthError(Exception):
    """Base class for failures surfaced as an error result."""
    kind: ErrorKind
    default_message = "Authentication error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AuthError):
    """A required input is missing or empty."""
    kind = ErrorKind.VALIDATION
    default_message = "phone/name/email/password required"


class DuplicateIdentityError(AuthError):
    """An identity with the same email or phone already exists."""
    kind = ErrorKind.DUPLICATE_IDENTITY
    default_message = "User already exists"


class InvalidCredentialsError(AuthError):
    """
    Generic authentication failure.

    Unknown identifier, missing credential and wrong secret all map here.
    """
    kind = ErrorKind.INVALID_CREDENTIALS
    default_message = "Invalid credentials"


class StoreUnavailableError(AuthError):
    """The identity store could not be reached or the operation timed out."""
    kind = ErrorKind.STORE_UNAVAILABLE
    default_message = "Identity store unavailable"


class UniqueViolationError(Exception):
    """Raised by the identity store when an insert hits a unique index."""


class IdentityNotFoundError(Exception):
    """Raised by the identity store when an update matches no document."""
