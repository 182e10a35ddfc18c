"""Dict-backed user directory."""

from typing import Iterable, Optional

from board.domain.model.user import User
from board.domain.repository.user import UserRepository
from board.domain.value import Email, UserId, Username


class InMemoryUserRepository(UserRepository):
    """UserRepository kept in a dict keyed by user id."""

    def __init__(self) -> None:
        self._by_id: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._by_id.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[User]:
        return [self._by_id[uid] for uid in set(user_ids) if uid in self._by_id]

    async def find_by_username(self, username: Username) -> Optional[User]:
        return next(
            (u for u in self._by_id.values() if u.username == username), None
        )

    async def find_by_email(self, email: Email) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.email == email), None)

    async def save(self, user: User) -> User:
        self._by_id[user.id] = user
        return user

    async def remove(self, user_id: UserId) -> None:
        """Drop a user, leaving any posts that reference it dangling."""
        self._by_id.pop(user_id, None)
