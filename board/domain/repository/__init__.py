"""Repository interfaces for the board domain.

Interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from board.domain.repository.post import PostRepository
from board.domain.repository.user import UserRepository

__all__ = [
    "PostRepository",
    "UserRepository",
]
