"""Session cookie helpers shared by the routers."""

from fastapi import Response

from masacarri.config import Settings
from masacarri.domain.error import NotAuthorizedError
from masacarri.domain.service import JWTService

# Read by the routers as the ``auth_token`` cookie parameter
SESSION_COOKIE = "auth_token"


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """Resolve the user behind a session cookie.

    Raises:
        NotAuthorizedError: If the cookie is missing, invalid or expired
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise NotAuthorizedError("authentication required")
    return user_id


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the HTTP-only session cookie."""
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        httponly=True,
        secure=settings.environment == "production",
        samesite="lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response) -> None:
    """Delete the session cookie with the attributes it was set with."""
    response.delete_cookie(key=SESSION_COOKIE, path="/")
