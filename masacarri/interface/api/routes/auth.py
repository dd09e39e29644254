"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel

from masacarri.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
)
from masacarri.config import Settings
from masacarri.domain.error import NotFoundError
from masacarri.domain.service import JWTService
from masacarri.interface.api.session import (
    clear_session_cookie,
    require_user_id,
    set_session_cookie,
)
from masacarri.util.jwt import JWTError

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)


class LoginAPIResponse(BaseModel):
    """Login response; the token itself only travels in the cookie."""

    user_id: str
    username: str


class SessionStatusResponse(BaseModel):
    """Whether the caller holds a valid session."""

    authenticated: bool
    user: GetCurrentUserResponse | None = None


@router.post("/login", response_model=LoginAPIResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginAPIResponse:
    """Log in with username and password.

    Sets an HTTP-only ``auth_token`` cookie holding the session JWT.

    Example:
        POST /api/login
        {"username": "admin", "password": "..."}

    Raises:
        NotAuthorizedError: If the credentials do not match (401)
    """
    result = await login_use_case.execute(request)
    set_session_cookie(response, result.token, settings)
    return LoginAPIResponse(user_id=result.user_id, username=result.username)


@router.get("/logout", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def logout(
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """End the session by clearing the cookie. Requires a session."""
    require_user_id(jwt_service, auth_token)
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    clear_session_cookie(response)
    return response


@router.get("/session", response_model=SessionStatusResponse)
async def get_session(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> SessionStatusResponse:
    """Report the current session without failing when there is none."""
    if not auth_token:
        return SessionStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
        return SessionStatusResponse(authenticated=True, user=user)
    except JWTError:
        # Invalid or expired token
        return SessionStatusResponse(authenticated=False)
    except NotFoundError:
        # JWT valid but user deleted since
        return SessionStatusResponse(authenticated=False)
