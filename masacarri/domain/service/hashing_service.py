"""One-way hashing of passwords and delete keys."""

import bcrypt

from masacarri.config import AuthSettings

from .base import Service


class HashingService(Service):
    """Domain service wrapping bcrypt."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize hashing service.

        Args:
            auth_settings: Authentication settings (bcrypt work factor)
        """
        self.rounds = auth_settings.bcrypt_rounds

    def hash(self, secret: str) -> str:
        """Hash a secret with a fresh salt."""
        hashed = bcrypt.hashpw(secret.encode(), bcrypt.gensalt(rounds=self.rounds))
        return hashed.decode()

    def verify(self, secret: str, hashed: str) -> bool:
        """Check a secret against a stored hash.

        Malformed stored hashes never verify.
        """
        try:
            return bcrypt.checkpw(secret.encode(), hashed.encode())
        except ValueError:
            return False
