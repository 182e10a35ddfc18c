"""Signed bearer tokens (PyJWT).

A token carries the user id and the username at issue time, and expires
after ``AuthSettings.jwt_expiry_days``.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from board.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by a bearer token."""

    user_id: str
    username: str
    exp: datetime


class JWTError(Exception):
    """Token could not be verified."""

    pass


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Sign a token for ``user_id``.

    Args:
        user_id: User ID
        username: Username at the time of issue
        settings: Authentication settings

    Returns:
        Encoded JWT
    """
    claims = TokenPayload(
        user_id=user_id,
        username=username,
        exp=datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    )
    return jwt.encode(
        claims.model_dump(), settings.jwt_secret, algorithm=settings.jwt_algorithm
    )


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of ``token`` and return its claims.

    Raises:
        JWTError: If the token is expired, forged or malformed
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload.model_validate(claims)
    except ValueError:
        raise JWTError("Invalid token")
