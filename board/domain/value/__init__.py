"""Domain value objects for the board."""

from board.domain.value.identifiers import CommentId, PostId, ReplyId, UserId
from board.domain.value.types import Email, ThreadPath, Username

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "ReplyId",
    # Types
    "Email",
    "ThreadPath",
    "Username",
]
