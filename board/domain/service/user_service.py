"""User domain service."""

from datetime import datetime
from typing import Iterable
from uuid import uuid4

import logfire

from board.domain.error import (
    InvalidCredentialsError,
    NotFoundError,
    UserAlreadyExistsError,
)
from board.domain.model import User
from board.domain.repository import UserRepository
from board.domain.value import Email, UserId, Username
from board.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for the user directory."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def register(self, username: Username, email: Email, password: str) -> User:
        """Create a new user.

        Args:
            username: Desired username
            email: Email address used to log in
            password: Plain-text password, stored hashed

        Returns:
            Created user

        Raises:
            UserAlreadyExistsError: If the username or email is taken
        """
        with logfire.span("user_service.register", username=username.root):
            if await self.user_repository.find_by_username(username):
                logfire.warn("Username already taken", username=username.root)
                raise UserAlreadyExistsError("username")
            if await self.user_repository.find_by_email(email):
                logfire.warn("Email already registered", username=username.root)
                raise UserAlreadyExistsError("email")

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=hash_password(password),
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), username=username.root)
            return saved

    async def authenticate(self, email: Email, password: str) -> User:
        """Check credentials and record the login time.

        Raises:
            InvalidCredentialsError: If no user matches the email and password
        """
        with logfire.span("user_service.authenticate"):
            user = await self.user_repository.find_by_email(email)
            if user is None or not verify_password(password, user.password_hash):
                logfire.warn("Login rejected")
                raise InvalidCredentialsError()

            user = await self.user_repository.save(
                user.model_copy(update={"last_login_at": datetime.now()})
            )
            logfire.info("User logged in", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def resolve_usernames(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, Username]:
        """Map user ids to usernames in one lookup.

        Ids of users that no longer exist are absent from the result.
        """
        ids = set(user_ids)
        if not ids:
            return {}

        users = await self.user_repository.find_by_ids(ids)
        resolved = {user.id: user.username for user in users}
        if len(resolved) != len(ids):
            logfire.debug(
                "Unresolved user ids", missing=len(ids) - len(resolved)
            )
        return resolved
