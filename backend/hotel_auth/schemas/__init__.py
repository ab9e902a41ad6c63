"""
Request and response schemas for API endpoints.
"""
from hotel_auth.schemas.auth import (
    SignupRequest,
    LoginRequest,
    AuthErrorDetail,
    AuthResult,
    AuthResponse,
)

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "AuthErrorDetail",
    "AuthResult",
    "AuthResponse",
]
