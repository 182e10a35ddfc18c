"""Domain model entities for the board."""

from board.domain.model.comment import Comment, Reply
from board.domain.model.post import Post, ThreadEffect, ThreadNode
from board.domain.model.user import User

__all__ = [
    "Comment",
    "Post",
    "Reply",
    "ThreadEffect",
    "ThreadNode",
    "User",
]
