"""Read models returned by post use cases.

Aggregates store author ids only. Views pair every id with the username
found in the user directory at read time.
"""

from datetime import datetime
from typing import Iterable, Mapping, Optional

from pydantic import BaseModel

from board.domain.model import Comment, Post, Reply
from board.domain.service import UserService
from board.domain.value import UserId, Username


class AuthorView(BaseModel):
    """Author reference. ``username`` is None if the user no longer exists."""

    id: str
    username: Optional[str]


class ReplyView(BaseModel):
    """Reply as returned to clients."""

    id: str
    content: str
    author: AuthorView
    created_at: datetime
    updated_at: datetime


class CommentView(BaseModel):
    """Comment as returned to clients, replies included."""

    id: str
    content: str
    author: AuthorView
    replies: list[ReplyView]
    created_at: datetime
    updated_at: datetime


class PostView(BaseModel):
    """Post as returned to clients, comments and replies included."""

    id: str
    title: str
    content: str
    tags: list[str]
    author: AuthorView
    likes: list[str]
    comments: list[CommentView]
    created_at: datetime
    updated_at: datetime


def _author(user_id: UserId, usernames: Mapping[UserId, Username]) -> AuthorView:
    username = usernames.get(user_id)
    return AuthorView(
        id=str(user_id), username=username.root if username is not None else None
    )


def _reply_view(reply: Reply, usernames: Mapping[UserId, Username]) -> ReplyView:
    return ReplyView(
        id=str(reply.id),
        content=reply.content,
        author=_author(reply.author_id, usernames),
        created_at=reply.created_at,
        updated_at=reply.updated_at,
    )


def _comment_view(
    comment: Comment, usernames: Mapping[UserId, Username]
) -> CommentView:
    return CommentView(
        id=str(comment.id),
        content=comment.content,
        author=_author(comment.author_id, usernames),
        replies=[_reply_view(reply, usernames) for reply in comment.replies],
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )


def post_view(post: Post, usernames: Mapping[UserId, Username]) -> PostView:
    """Build the client view of a post.

    Args:
        post: Post aggregate
        usernames: Resolved usernames keyed by user id

    Returns:
        Post view with every author resolved
    """
    return PostView(
        id=str(post.id),
        title=post.title,
        content=post.content,
        tags=list(post.tags),
        author=_author(post.author_id, usernames),
        likes=[str(user_id) for user_id in post.likes],
        comments=[_comment_view(comment, usernames) for comment in post.comments],
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


async def resolve_post_views(
    posts: Iterable[Post], user_service: UserService
) -> list[PostView]:
    """Build views for several posts with a single username lookup."""
    posts = list(posts)
    author_ids: set[UserId] = set()
    for post in posts:
        author_ids |= post.author_ids()

    usernames = await user_service.resolve_usernames(author_ids)
    return [post_view(post, usernames) for post in posts]


async def resolve_post_view(post: Post, user_service: UserService) -> PostView:
    """Build the view of one post."""
    views = await resolve_post_views([post], user_service)
    return views[0]
