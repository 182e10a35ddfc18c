"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from board.domain.model.user import User
from board.domain.value import Email, UserId, Username


class UserRepository(ABC):
    """Repository for the User aggregate (the user directory)."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[User]:
        """Find all existing users among ``user_ids``.

        Unknown ids are skipped.
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            UserAlreadyExistsError: If the username or email belongs to
                another user
        """
        pass
