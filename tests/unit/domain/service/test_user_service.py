"""Unit tests for UserService and HashingService."""

from uuid import uuid4

import pytest

from masacarri.config import AuthSettings
from masacarri.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from masacarri.domain.service import HashingService, UserService
from masacarri.domain.value import UserId, Username
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestHashingService:
    """Tests for bcrypt hashing."""

    def test_hash_verifies(self):
        service = HashingService(AuthSettings(bcrypt_rounds=4))

        hashed = service.hash("hunter2")

        assert hashed != "hunter2"
        assert service.verify("hunter2", hashed)
        assert not service.verify("hunter3", hashed)

    def test_salts_differ(self):
        service = HashingService(AuthSettings(bcrypt_rounds=4))

        assert service.hash("same") != service.hash("same")

    def test_malformed_hash_never_verifies(self):
        service = HashingService(AuthSettings(bcrypt_rounds=4))

        assert not service.verify("anything", "-")


class TestUserService:
    """Tests for account management and authentication."""

    @pytest.mark.asyncio
    async def test_create_and_authenticate(self, unit_env):
        service = await unit_env.get(UserService)

        created = await service.create_user(Username("admin"), "correct horse")
        user = await service.authenticate("admin", "correct horse")

        assert user.id == created.id
        assert user.password_hash != "correct horse"

    @pytest.mark.asyncio
    async def test_wrong_password_is_rejected(self, unit_env):
        service = await unit_env.get(UserService)
        await service.create_user(Username("admin"), "correct horse")

        with pytest.raises(NotAuthorizedError) as exc_info:
            await service.authenticate("admin", "battery staple")

        assert exc_info.value.message == "invalid username or password"

    @pytest.mark.asyncio
    async def test_unknown_user_is_rejected(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotAuthorizedError):
            await service.authenticate("nobody", "whatever")

    @pytest.mark.asyncio
    async def test_malformed_username_is_rejected(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotAuthorizedError):
            await service.authenticate("has space", "whatever")

    @pytest.mark.asyncio
    async def test_duplicate_username(self, unit_env):
        service = await unit_env.get(UserService)
        await service.create_user(Username("admin"), "pw")

        with pytest.raises(ValidationError):
            await service.create_user(Username("admin"), "other")

    @pytest.mark.asyncio
    async def test_empty_password(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(ValidationError):
            await service.create_user(Username("admin"), "")

    @pytest.mark.asyncio
    async def test_change_password(self, unit_env):
        service = await unit_env.get(UserService)
        await service.create_user(Username("admin"), "old")

        await service.change_password(Username("admin"), "new")

        await service.authenticate("admin", "new")
        with pytest.raises(NotAuthorizedError):
            await service.authenticate("admin", "old")

    @pytest.mark.asyncio
    async def test_delete_user(self, unit_env):
        service = await unit_env.get(UserService)
        user = await service.create_user(Username("admin"), "pw")

        await service.delete_user(Username("admin"))

        with pytest.raises(NotFoundError):
            await service.get_by_id(user.id)
        assert await service.list_users() == []

    @pytest.mark.asyncio
    async def test_delete_missing_user(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.delete_user(Username("ghost"))

    @pytest.mark.asyncio
    async def test_get_missing_user(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.get_by_id(UserId(uuid4()))
