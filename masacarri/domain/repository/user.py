"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from masacarri.domain.model.user import User
from masacarri.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for administrator accounts."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The login name

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """List every user ordered by username."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Create or update a user."""
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user."""
        pass
