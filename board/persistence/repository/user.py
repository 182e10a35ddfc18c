"""PostgreSQL implementation of the User repository."""

from typing import Iterable, Optional

import logfire
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.error import UserAlreadyExistsError
from board.domain.model import User
from board.domain.repository.user import UserRepository
from board.domain.value import Email, UserId, Username
from board.persistence.mappers import row_to_user, user_to_row
from board.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, *criteria) -> Optional[User]:
        result = await self.session.execute(select(users_table).where(*criteria))
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[User]:
        """Find users by ID in a single query."""
        ids = list(user_ids)
        if not ids:
            return []
        result = await self.session.execute(
            select(users_table).where(users_table.c.id.in_(ids))
        )
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        return await self._find_one(users_table.c.username == username.root)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        return await self._find_one(users_table.c.email == email.root)

    async def save(self, user: User) -> User:
        """Insert a user, or update it if the ID exists.

        Raises:
            UserAlreadyExistsError: If another user already holds the username
                or email, e.g. after losing a concurrent registration
        """
        values = user_to_row(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={key: value for key, value in values.items() if key != "id"},
        )
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            field = _conflicting_field(e)
            logfire.warn("User unique constraint violated", field=field)
            raise UserAlreadyExistsError(field) from e
        return user


def _conflicting_field(error: IntegrityError) -> str:
    # Postgres names the violated constraint, e.g. users_email_key
    return "email" if "email" in str(error.orig) else "username"
