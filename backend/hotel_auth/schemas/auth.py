"""
Authentication request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field

from hotel_auth.core.exceptions import AuthError, ErrorKind
from hotel_auth.models.identity import IdentityPublic


class SignupRequest(BaseModel):
    """
    Signup request body.

    Fields are optional here so that missing values reach the credential
    service and are reported as a validation error result.
    """
    phone: Optional[str] = Field(None, description="Phone number (unique)")
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Email address (unique)")
    password: Optional[str] = Field(None, description="Password")


class LoginRequest(BaseModel):
    """
    Login request body.

    Accepts either ``{"user", "pass"}`` where ``user`` is an email or a
    phone number, or ``{"email", "password"}``.
    """
    user: Optional[str] = Field(None, description="Email or phone number")
    pass_: Optional[str] = Field(None, alias="pass", description="Password")
    email: Optional[str] = Field(None, description="Email address")
    password: Optional[str] = Field(None, description="Password")

    class Config:
        populate_by_name = True

    def credentials(self) -> tuple[str, str]:
        """Return (identifier, secret), preferring the user/pass form."""
        if self.user:
            return self.user, self.pass_ or ""
        return self.email or "", self.password or ""


class AuthErrorDetail(BaseModel):
    """Typed error carried by a failed result."""
    kind: ErrorKind = Field(..., description="Error kind")
    message: str = Field(..., description="Human readable message")


class AuthResult(BaseModel):
    """Outcome of a signup or authentication call."""
    success: bool
    message: Optional[str] = None
    identity: Optional[IdentityPublic] = None
    error: Optional[AuthErrorDetail] = None

    @classmethod
    def ok(cls, identity: IdentityPublic, message: Optional[str] = None) -> "AuthResult":
        return cls(success=True, message=message, identity=identity)

    @classmethod
    def failure(cls, exc: AuthError) -> "AuthResult":
        return cls(
            success=False,
            error=AuthErrorDetail(kind=exc.kind, message=exc.message),
        )


class AuthResponse(BaseModel):
    """Signup/login response body."""
    success: bool = Field(..., description="Always true on 200 responses")
    message: Optional[str] = Field(None, description="Success message")
    user: IdentityPublic = Field(..., description="Public identity fields")
