"""Principal resolution for authenticated routes.

The principal is the ``user_id`` claim of a JWT sent either as an
``Authorization: Bearer`` header or as the ``auth_token`` cookie.
"""

from uuid import UUID

from fastapi import HTTPException, status

from sportalk.config import AuthSettings
from sportalk.util.jwt import JWTError, verify_token


def extract_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the bearer token, falling back to the cookie."""
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token:
            return token.strip()
    return auth_token


def optional_principal(
    authorization: str | None, auth_token: str | None, settings: AuthSettings
) -> str | None:
    """Principal id if a valid token was sent, None otherwise."""
    token = extract_token(authorization, auth_token)
    if not token:
        return None
    try:
        return _principal_from_token(token, settings)
    except JWTError:
        return None


def require_principal(
    authorization: str | None, auth_token: str | None, settings: AuthSettings
) -> str:
    """Principal id of the caller.

    Raises:
        HTTPException: 401 if no token was sent or the token is invalid
    """
    token = extract_token(authorization, auth_token)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "unauthenticated", "message": "Not authenticated"},
        )
    try:
        return _principal_from_token(token, settings)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "unauthenticated", "message": str(e)},
        )


def _principal_from_token(token: str, settings: AuthSettings) -> str:
    payload = verify_token(token, settings)
    try:
        return str(UUID(payload.user_id))
    except ValueError:
        raise JWTError("Invalid token subject")
