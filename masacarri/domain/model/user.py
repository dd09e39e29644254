"""User entity."""

from masacarri.domain.model.common import DomainModel
from masacarri.domain.value import UserId, Username


class User(DomainModel):
    """Administrator account allowed to manage pages and comments."""

    id: UserId
    username: Username
    password_hash: str
    flags: int = 0
