"""Unit tests for the login and session use cases."""

import pytest
from dishka import AsyncContainer

from masacarri.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
)
from masacarri.domain.error import NotAuthorizedError, NotFoundError
from masacarri.domain.service import JWTService, UserService
from masacarri.domain.value import Username
from masacarri.util.jwt import JWTError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_issues_token_for_user(self, unit_env: AsyncContainer):
        user_service = await unit_env.get(UserService)
        jwt_service = await unit_env.get(JWTService)
        user = await user_service.create_user(Username("admin"), "s3cret")
        use_case = await unit_env.get(LoginUseCase)

        response = await use_case.execute(
            LoginRequest(username="admin", password="s3cret")
        )

        assert response.user_id == str(user.id)
        assert response.username == "admin"
        assert jwt_service.verify_token(response.token).user_id == str(user.id)

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env: AsyncContainer):
        user_service = await unit_env.get(UserService)
        await user_service.create_user(Username("admin"), "s3cret")
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(LoginRequest(username="admin", password="nope"))


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_resolves_token(self, unit_env: AsyncContainer):
        user_service = await unit_env.get(UserService)
        jwt_service = await unit_env.get(JWTService)
        user = await user_service.create_user(Username("admin"), "s3cret")
        use_case = await unit_env.get(GetCurrentUserUseCase)

        response = await use_case.execute(
            GetCurrentUserRequest(token=jwt_service.create_token(user))
        )

        assert response.user_id == str(user.id)
        assert response.username == "admin"

    @pytest.mark.asyncio
    async def test_garbage_token(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentUserRequest(token="not-a-jwt"))

    @pytest.mark.asyncio
    async def test_deleted_user(self, unit_env: AsyncContainer):
        user_service = await unit_env.get(UserService)
        jwt_service = await unit_env.get(JWTService)
        user = await user_service.create_user(Username("admin"), "s3cret")
        token = jwt_service.create_token(user)
        await user_service.delete_user(Username("admin"))
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCurrentUserRequest(token=token))
