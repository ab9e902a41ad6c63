"""
Credential service for signup and login.

Verifies secrets against both stored credential formats and upgrades
legacy records to bcrypt hashes on their first successful login.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi.concurrency import run_in_threadpool
from passlib.exc import PasswordValueError

from hotel_auth.core.exceptions import (
    AuthError,
    DuplicateIdentityError,
    IdentityNotFoundError,
    InvalidCredentialsError,
    StoreUnavailableError,
    UniqueViolationError,
    ValidationError,
)
from hotel_auth.core.security import (
    dummy_verify,
    hash_password,
    verify_legacy_password,
    verify_password,
)
from hotel_auth.database.identity_store import (
    MongoIdentityStore,
    email_or_phone_predicate,
    identifier_predicate,
)
from hotel_auth.models.identity import Credential, Identity, IdentityPublic
from hotel_auth.schemas.auth import AuthResult, SignupRequest

logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> str:
    return value.strip() if value else ""


def _mask(identifier: str) -> str:
    """Mask an email or phone for log output."""
    if "@" in identifier:
        local, _, domain = identifier.partition("@")
        return f"{local[:1]}***@{domain}"
    return f"***{identifier[-4:]}"


class CredentialStore:
    """Service for signup and credential verification."""

    def __init__(self, identities: MongoIdentityStore):
        """Initialize with the identity store."""
        self.identities = identities

    async def signup(self, request: SignupRequest) -> AuthResult:
        """
        Register a new identity.

        Args:
            request: Signup request with phone, name, email and password

        Returns:
            AuthResult with the created identity's public fields, or an
            error of kind validation_error, duplicate_identity or
            store_unavailable
        """
        try:
            identity = await self._create_identity(request)
        except AuthError as e:
            return AuthResult.failure(e)
        return AuthResult.ok(identity, message="Signup successful")

    async def authenticate(self, identifier: str, secret: str) -> AuthResult:
        """
        Verify a secret for the identity matching an email or phone.

        Legacy plaintext credentials are rewritten as bcrypt hashes when
        they match.

        Args:
            identifier: Email address or phone number
            secret: Plain text password as supplied by the caller

        Returns:
            AuthResult with the identity's public fields, or an error of
            kind validation_error, invalid_credentials or store_unavailable
        """
        try:
            identity = await self._verify(identifier, secret)
        except AuthError as e:
            return AuthResult.failure(e)
        return AuthResult.ok(identity.to_public())

    async def _create_identity(self, request: SignupRequest) -> IdentityPublic:
        phone = _clean(request.phone)
        name = _clean(request.name)
        email = _clean(request.email).lower()
        password = request.password or ""

        if not (phone and name and email and password.strip()):
            raise ValidationError()

        existing = await self.identities.find_one(
            email_or_phone_predicate(email, phone)
        )
        if existing:
            logger.info("Signup rejected: %s or %s already registered",
                        _mask(email), _mask(phone))
            raise DuplicateIdentityError()

        try:
            hashed_password = await run_in_threadpool(hash_password, password)
        except PasswordValueError as e:
            # bcrypt rejects NUL bytes
            logger.info("Signup rejected for %s: %s", _mask(email), e)
            raise ValidationError("password contains unsupported characters")
        created_at = datetime.now(timezone.utc)

        try:
            identity_id = await self.identities.insert({
                "phone": phone,
                "name": name,
                "email": email,
                "password": hashed_password,
                "createdAt": created_at,
            })
        except UniqueViolationError:
            # Another signup inserted the same email/phone after our pre-check
            logger.info("Signup for %s lost an insert race", _mask(email))
            raise DuplicateIdentityError()

        logger.info("Created identity %s", identity_id)
        return IdentityPublic(
            id=identity_id,
            phone=phone,
            name=name,
            email=email,
            created_at=created_at,
        )

    async def _verify(self, identifier: str, secret: str) -> Identity:
        identifier = _clean(identifier)
        if not identifier or not secret:
            raise ValidationError("Email/phone and password are required")

        document = await self.identities.find_one(identifier_predicate(identifier))
        if document is None:
            logger.info("Login failed: no identity matches %s", _mask(identifier))
            await run_in_threadpool(dummy_verify)
            raise InvalidCredentialsError()

        identity = Identity.from_document(document)
        credential = identity.credential
        if credential is None:
            logger.info("Login failed: identity %s has no credential set", identity.id)
            await run_in_threadpool(dummy_verify)
            raise InvalidCredentialsError()

        if credential.is_canonical:
            if not await self._verify_canonical(identity, credential, secret):
                logger.info("Login failed: password mismatch for identity %s", identity.id)
                raise InvalidCredentialsError()
            return identity

        if not verify_legacy_password(secret, credential.value):
            logger.info("Login failed: legacy password mismatch for identity %s", identity.id)
            await run_in_threadpool(dummy_verify)
            raise InvalidCredentialsError()

        await self._migrate(identity, secret)
        return identity

    async def _verify_canonical(
        self,
        identity: Identity,
        credential: Credential,
        secret: str,
    ) -> bool:
        try:
            return await run_in_threadpool(verify_password, secret, credential.value)
        except PasswordValueError as e:
            logger.info("Login failed: secret rejected by hasher for identity %s: %s",
                        identity.id, e)
            return False
        except ValueError as e:
            logger.error("Malformed password hash for identity %s: %s", identity.id, e)
            return False

    async def _migrate(self, identity: Identity, secret: str) -> None:
        """
        Replace a matched legacy credential with its bcrypt hash.

        Failures are logged and never fail the login.
        """
        try:
            hashed_password = await run_in_threadpool(hash_password, secret)
        except PasswordValueError as e:
            logger.warning(
                "Credential migration skipped for identity %s: %s", identity.id, e
            )
            return
        try:
            await self.identities.update_credential(identity.document_id, hashed_password)
        except (StoreUnavailableError, IdentityNotFoundError) as e:
            logger.warning(
                "Credential migration failed for identity %s; login still succeeds: %s",
                identity.id, e,
            )
            return
        logger.info("Migrated legacy credential for identity %s", identity.id)
