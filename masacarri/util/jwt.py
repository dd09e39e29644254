"""Session token encoding with PyJWT.

Tokens are HMAC-signed and carry the user ID as the ``sub`` claim. The
server keeps no session state; logging out only drops the cookie.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ConfigDict, Field

from masacarri.config import AuthSettings


class TokenPayload(BaseModel):
    """Decoded session claims."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="sub")
    username: str
    issued_at: datetime = Field(alias="iat")
    exp: datetime


class JWTError(Exception):
    """Token is malformed, forged or expired."""

    pass


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Sign a session token valid for ``jwt_expiry_days``."""
    now = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "username": username,
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature and expiry, then decode the claims.

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "username", "iat", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e
    return TokenPayload.model_validate(claims)
