"""User domain service."""

import asyncio
from uuid import uuid4

import logfire

from masacarri.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from masacarri.domain.model import User
from masacarri.domain.repository import UserRepository
from masacarri.domain.value import UserId, Username

from .base import Service
from .hashing_service import HashingService

INVALID_CREDENTIALS_MESSAGE = "invalid username or password"


class UserService(Service):
    """Domain service for administrator accounts."""

    def __init__(
        self, user_repository: UserRepository, hashing_service: HashingService
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            hashing_service: Password hashing service
        """
        self.user_repository = user_repository
        self.hashing_service = hashing_service

    async def authenticate(self, username: str, password: str) -> User:
        """Verify a username/password pair.

        Returns:
            The authenticated user

        Raises:
            NotAuthorizedError: If the user is unknown or the password is wrong
        """
        with logfire.span("user_service.authenticate", username=username):
            try:
                user = await self.user_repository.find_by_username(Username(username))
            except ValueError:
                user = None

            if user is None or not await asyncio.to_thread(
                self.hashing_service.verify, password, user.password_hash
            ):
                logfire.warn("Login rejected", username=username)
                raise NotAuthorizedError(INVALID_CREDENTIALS_MESSAGE)

            logfire.info("Login accepted", username=username, user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def list_users(self) -> list[User]:
        """List every account."""
        return await self.user_repository.find_all()

    async def create_user(self, username: Username, password: str) -> User:
        """Create an account.

        Raises:
            ValidationError: If the username is taken or the password is empty
        """
        with logfire.span("user_service.create_user", username=username.root):
            if not password:
                raise ValidationError("Password is required.")
            if await self.user_repository.find_by_username(username):
                raise ValidationError(f"User '{username}' already exists.")

            user = User(
                id=UserId(uuid4()),
                username=username,
                password_hash=await asyncio.to_thread(
                    self.hashing_service.hash, password
                ),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User created", username=username.root, user_id=str(saved.id))
            return saved

    async def change_password(self, username: Username, password: str) -> User:
        """Replace an account's password.

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: If the password is empty
        """
        with logfire.span("user_service.change_password", username=username.root):
            if not password:
                raise ValidationError("Password is required.")
            user = await self.user_repository.find_by_username(username)
            if user is None:
                raise NotFoundError("User", username.root)

            updated = user.model_copy(
                update={
                    "password_hash": await asyncio.to_thread(
                        self.hashing_service.hash, password
                    )
                }
            )
            saved = await self.user_repository.save(updated)
            logfire.info("Password changed", username=username.root)
            return saved

    async def delete_user(self, username: Username) -> None:
        """Delete an account.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_service.delete_user", username=username.root):
            user = await self.user_repository.find_by_username(username)
            if user is None:
                raise NotFoundError("User", username.root)
            await self.user_repository.delete(user.id)
            logfire.info("User deleted", username=username.root)
