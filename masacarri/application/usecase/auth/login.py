"""Login use case."""

import logfire
from pydantic import BaseModel

from masacarri.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request with administrator credentials."""

    username: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user_id: str
    username: str


class LoginUseCase:
    """Use case for password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Verify username and password via user service
        2. Issue a session token

        Raises:
            NotAuthorizedError: If the credentials do not match
        """
        with logfire.span("login_user", username=request.username):
            user = await self.user_service.authenticate(
                request.username, request.password
            )
            token = self.jwt_service.create_token(user)

            return LoginResponse(
                token=token,
                user_id=str(user.id),
                username=user.username.root,
            )
