"""PostgreSQL repository implementations."""

from board.persistence.repository.post import PostgresPostRepository
from board.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresUserRepository",
]
