"""Domain value objects for the board.

Value objects are immutable and defined by their values, not identity.
"""

import re

from pydantic import field_validator

from board.domain.value.common import RootValueObject, ValueObject
from board.domain.value.identifiers import CommentId, ReplyId


class Username(RootValueObject[str]):
    """Public display name of a user.

    3-30 characters: letters, digits, underscore, dot or hyphen.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits, '_', '.' or '-'"
            )
        return v


class Email(RootValueObject[str]):
    """Email address, stored lowercased."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate a plausible email address."""
        v = v.strip().lower()
        if len(v) > 255 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Invalid email address")
        return v


class ThreadPath(ValueObject):
    """Location of a node inside a post aggregate.

    - no ids: the post itself
    - comment_id: a comment of the post
    - comment_id + reply_id: a reply of that comment
    """

    comment_id: CommentId | None = None
    reply_id: ReplyId | None = None

    @field_validator("reply_id")
    @classmethod
    def validate_reply_has_comment(cls, v, info):
        """A reply can only be addressed through its comment."""
        if v is not None and info.data.get("comment_id") is None:
            raise ValueError("reply_id requires comment_id")
        return v
