"""Session resolution for API routes.

The session token is read from the auth cookie first, then from an
``Authorization: Bearer`` header. Routes resolve the session explicitly
and hand the user ID to their use case.
"""

from fastapi import Request, Response

from askboard.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from askboard.application.usecase.base import UserInfo
from askboard.config import Settings
from askboard.domain.error import AuthenticationError

SessionUser = UserInfo


def extract_token(request: Request, cookie_name: str) -> str | None:
    """Find the session token on a request."""
    token = request.cookies.get(cookie_name)
    if token:
        return token

    authorization = request.headers.get("authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


async def optional_user(
    request: Request, use_case: GetCurrentUserUseCase, settings: Settings
) -> SessionUser | None:
    """Resolve the session user, None when there is no valid session."""
    token = extract_token(request, settings.auth.cookie_name)
    if not token:
        return None
    try:
        result = await use_case.execute(GetCurrentUserRequest(token=token))
    except AuthenticationError:
        return None
    return result.user


async def require_user(
    request: Request, use_case: GetCurrentUserUseCase, settings: Settings
) -> SessionUser:
    """Resolve the session user.

    Raises:
        AuthenticationError: If there is no valid session
    """
    user = await optional_user(request, use_case, settings)
    if user is None:
        raise AuthenticationError()
    return user


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Store the session token in an HTTP-only cookie."""
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Remove the session cookie."""
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
