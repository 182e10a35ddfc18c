"""Comment and reply entities.

Comments are embedded in a post and replies are embedded in a comment.
Threading stops at replies: a reply has no children of its own.
"""

from datetime import datetime

from pydantic import Field, model_validator

from board.domain.error import NotFoundError, ValidationError
from board.domain.model.common import DomainModel
from board.domain.value import CommentId, ReplyId, UserId


class Reply(DomainModel):
    """Reply to a comment."""

    id: ReplyId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class Comment(DomainModel):
    """Comment on a post.

    Reply ids are unique within ``replies``; the list keeps creation order.
    """

    id: CommentId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    replies: list[Reply] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_unique_reply_ids(self) -> "Comment":
        """Reject duplicate reply ids."""
        ids = [reply.id for reply in self.replies]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate reply id in comment {self.id}")
        return self

    def find_reply(self, reply_id: ReplyId) -> Reply:
        """Get a reply by id.

        Raises:
            NotFoundError: If the comment has no such reply
        """
        for reply in self.replies:
            if reply.id == reply_id:
                return reply
        raise NotFoundError("Reply", str(reply_id))

    def with_reply(self, reply: Reply) -> "Comment":
        """Append a reply.

        Raises:
            ValidationError: If a reply with the same id already exists
        """
        if any(existing.id == reply.id for existing in self.replies):
            raise ValidationError(f"Reply {reply.id} already exists")
        return self.evolve(replies=[*self.replies, reply])
