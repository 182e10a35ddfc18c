"""User read model shared by the auth use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from board.domain.model import User


class UserView(BaseModel):
    """Public profile of the authenticated user."""

    id: str
    username: str
    email: str
    created_at: datetime
    updated_at: datetime
    last_login_at: Optional[datetime]

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            created_at=user.created_at,
            updated_at=user.updated_at,
            last_login_at=user.last_login_at,
        )


class AuthResponse(BaseModel):
    """Token plus the user it was issued for."""

    token: str
    user: UserView
