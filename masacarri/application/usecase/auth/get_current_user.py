"""Resolve the administrator behind a session cookie."""

from uuid import UUID

from pydantic import BaseModel

from masacarri.domain.service import JWTService, UserService
from masacarri.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Session token taken from the cookie."""

    token: str


class GetCurrentUserResponse(BaseModel):
    """The logged-in administrator."""

    user_id: str
    username: str


class GetCurrentUserUseCase:
    """Use case for resolving the user behind a session token."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Verify the token, then load its user.

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If the user was deleted after the token was issued
        """
        payload = self.jwt_service.verify_token(request.token)
        user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))

        return GetCurrentUserResponse(
            user_id=str(user.id),
            username=user.username.root,
        )
