"""Post aggregate root.

A post embeds its comments and each comment embeds its replies. The post is
the only unit of persistence: every change to a comment, reply or like
produces a new Post which is saved as a whole.
"""

from datetime import datetime
from typing import Callable, Optional, TypeAlias, Union

from pydantic import Field, model_validator

from board.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from board.domain.model.comment import Comment, Reply
from board.domain.model.common import DomainModel
from board.domain.value import CommentId, PostId, ThreadPath, UserId

ThreadNode: TypeAlias = Union["Post", Comment, Reply]

# Receives the located node and returns its replacement, or None to remove it
ThreadEffect: TypeAlias = Callable[[ThreadNode], Optional[ThreadNode]]


class Post(DomainModel):
    """Post aggregate root.

    Invariants:
    - comment ids are unique within ``comments``
    - each user id appears at most once in ``likes``
    - ``version`` increases by one on every save (set by the repository)
    """

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=20000)
    tags: list[str] = Field(default_factory=list)
    likes: list[UserId] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_unique_members(self) -> "Post":
        """Reject duplicate comment ids and duplicate likes."""
        comment_ids = [comment.id for comment in self.comments]
        if len(comment_ids) != len(set(comment_ids)):
            raise ValueError(f"Duplicate comment id in post {self.id}")
        if len(self.likes) != len(set(self.likes)):
            raise ValueError(f"Duplicate like in post {self.id}")
        return self

    def find_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by id.

        Raises:
            NotFoundError: If the post has no such comment
        """
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        raise NotFoundError("Comment", str(comment_id))

    def with_comment(self, comment: Comment) -> "Post":
        """Append a comment.

        Raises:
            ValidationError: If a comment with the same id already exists
        """
        if any(existing.id == comment.id for existing in self.comments):
            raise ValidationError(f"Comment {comment.id} already exists")
        return self.evolve(comments=[*self.comments, comment])

    def toggle_like(self, user_id: UserId) -> "Post":
        """Add the user's like, or remove it if already present."""
        if user_id in self.likes:
            likes = [liker for liker in self.likes if liker != user_id]
        else:
            likes = [*self.likes, user_id]
        return self.evolve(likes=likes)

    def revise(
        self,
        title: str | None = None,
        content: str | None = None,
        tags: list[str] | None = None,
    ) -> "Post":
        """Replace the supplied fields; None leaves a field unchanged."""
        changes: dict = {}
        if title is not None:
            changes["title"] = title
        if content is not None:
            changes["content"] = content
        if tags is not None:
            changes["tags"] = list(tags)
        return self.evolve(**changes)

    def author_ids(self) -> set[UserId]:
        """All user ids that author something in this aggregate."""
        ids = {self.author_id}
        for comment in self.comments:
            ids.add(comment.author_id)
            ids.update(reply.author_id for reply in comment.replies)
        return ids

    def apply(
        self,
        path: ThreadPath,
        actor_id: UserId,
        effect: ThreadEffect,
        *,
        require_author: bool,
        now: datetime,
    ) -> "Post":
        """Locate the node at ``path``, authorize, and apply ``effect``.

        The returned post embeds the effect's result in place of the located
        node (or drops the node when the effect returns None). Both the post
        and the replacement node get ``updated_at = now``. Nothing is changed
        when locating or authorizing fails.

        Args:
            path: Post, comment or reply to operate on
            actor_id: Authenticated user performing the operation
            effect: Mutation applied to the located node
            require_author: Whether ``actor_id`` must be the node's author
            now: Timestamp recorded as ``updated_at``

        Raises:
            NotFoundError: If the comment or reply does not exist
            NotAuthorizedError: If authorship is required and not held
            ValidationError: If the effect tries to remove the post itself
        """
        if path.comment_id is None:
            _authorize(self, "post", actor_id, require_author)
            updated = effect(self)
            if updated is None:
                raise ValidationError("A post cannot remove itself")
            return updated.evolve(updated_at=now)

        comment = self.find_comment(path.comment_id)

        if path.reply_id is None:
            _authorize(comment, "comment", actor_id, require_author)
            new_comment = _stamp(effect(comment), now)
        else:
            reply = comment.find_reply(path.reply_id)
            _authorize(reply, "reply", actor_id, require_author)
            new_comment = comment.evolve(
                replies=_replace(comment.replies, reply.id, _stamp(effect(reply), now))
            )

        return self.evolve(
            comments=_replace(self.comments, comment.id, new_comment),
            updated_at=now,
        )


def _authorize(
    node: ThreadNode, resource: str, actor_id: UserId, require_author: bool
) -> None:
    if require_author and node.author_id != actor_id:
        raise NotAuthorizedError(resource, str(node.id), str(actor_id))


def _stamp(node: Optional[ThreadNode], now: datetime) -> Optional[ThreadNode]:
    return None if node is None else node.evolve(updated_at=now)


def _replace(nodes: list, node_id, replacement) -> list:
    """Swap the node with ``node_id`` for ``replacement`` (None removes it)."""
    if replacement is None:
        return [node for node in nodes if node.id != node_id]
    return [replacement if node.id == node_id else node for node in nodes]
