"""
Authentication router for signup and login.
"""
from fastapi import APIRouter, Depends, HTTPException, Request, status

from hotel_auth.core.exceptions import ErrorKind
from hotel_auth.schemas.auth import AuthResponse, AuthResult, LoginRequest, SignupRequest
from hotel_auth.services.credential_store import CredentialStore

router = APIRouter(prefix="/auth", tags=["Authentication"])

STATUS_BY_ERROR_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATE_IDENTITY: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.STORE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}

# Every failed login is a 401 except an unreachable store
LOGIN_STATUS_BY_ERROR_KIND = {
    **STATUS_BY_ERROR_KIND,
    ErrorKind.VALIDATION: status.HTTP_401_UNAUTHORIZED,
}


def get_credential_store(request: Request) -> CredentialStore:
    """Dependency returning the CredentialStore built at startup."""
    return request.app.state.credential_store


def to_response(
    result: AuthResult,
    status_by_kind: dict[ErrorKind, int] = STATUS_BY_ERROR_KIND,
) -> AuthResponse:
    """Convert a service result into a response body or an HTTP error."""
    if not result.success:
        kind = result.error.kind
        headers = None
        if status_by_kind[kind] == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Basic"}
        raise HTTPException(
            status_code=status_by_kind[kind],
            detail=result.error.message,
            headers=headers,
        )
    return AuthResponse(
        success=True,
        message=result.message,
        user=result.identity,
    )


@router.post(
    "/signup",
    response_model=AuthResponse,
    response_model_exclude_none=True,
    summary="Register a new user",
)
async def signup(
    body: SignupRequest,
    credential_store: CredentialStore = Depends(get_credential_store),
):
    """
    Register a new user account.

    - **phone**: Phone number (must be unique)
    - **name**: Display name
    - **email**: Email address (must be unique)
    - **password**: Password
    """
    return to_response(await credential_store.signup(body))


@router.post(
    "/login",
    response_model=AuthResponse,
    response_model_exclude_none=True,
    summary="Login with email or phone",
)
async def login(
    body: LoginRequest,
    credential_store: CredentialStore = Depends(get_credential_store),
):
    """
    Authenticate with an email or phone number and a password.

    Accepts `{"user": ..., "pass": ...}` or `{"email": ..., "password": ...}`.
    """
    identifier, secret = body.credentials()
    return to_response(
        await credential_store.authenticate(identifier, secret),
        LOGIN_STATUS_BY_ERROR_KIND,
    )
