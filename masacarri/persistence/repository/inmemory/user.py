"""In-memory user repository for testing."""

from typing import Optional

from masacarri.domain.model.user import User
from masacarri.domain.repository.user import UserRepository
from masacarri.domain.value import UserId, Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._store.users.values():
            if user.username == username:
                return user
        return None

    async def find_all(self) -> list[User]:
        """List every user ordered by username."""
        return sorted(self._store.users.values(), key=lambda u: u.username.root)

    async def save(self, user: User) -> User:
        """Create or update a user."""
        self._store.users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> None:
        """Delete a user."""
        self._store.users.pop(user_id, None)
