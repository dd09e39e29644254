"""PostgreSQL implementation of User repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from masacarri.domain.model import User
from masacarri.domain.repository import UserRepository
from masacarri.domain.value import UserId, Username
from masacarri.persistence.mappers import row_to_user, user_to_dict
from masacarri.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """Administrator accounts in the ``users`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _first(self, *criteria) -> Optional[User]:
        result = await self.session.execute(select(users_table).where(*criteria))
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._first(users_table.c.id == user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        return await self._first(users_table.c.username == username.root)

    async def find_all(self) -> List[User]:
        result = await self.session.execute(
            select(users_table).order_by(users_table.c.username)
        )
        return [row_to_user(dict(row)) for row in result.mappings()]

    async def save(self, user: User) -> User:
        """Insert, or overwrite the row with the same ID."""
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={key: value for key, value in values.items() if key != "id"},
        )
        await self.session.execute(stmt)
        return user

    async def delete(self, user_id: UserId) -> None:
        await self.session.execute(
            users_table.delete().where(users_table.c.id == user_id)
        )
