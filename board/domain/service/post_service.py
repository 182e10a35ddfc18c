"""Post domain service.

Every change to a post, its comments, replies or likes goes through
``_mutate``: load the aggregate, apply one located and authorized change,
and save it back conditional on the loaded version. A version conflict
restarts the cycle from a fresh load.
"""

from datetime import datetime
from uuid import uuid4

import logfire

from board.domain.error import (
    ConcurrentModificationError,
    NotAuthorizedError,
    NotFoundError,
)
from board.domain.model import Comment, Post, Reply, ThreadEffect
from board.domain.repository import PostRepository
from board.domain.value import CommentId, PostId, ReplyId, ThreadPath, UserId

from .base import Service


class PostService(Service):
    """Domain service for the Post aggregate."""

    def __init__(self, post_repository: PostRepository, max_retries: int = 3) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            max_retries: Extra attempts after a version conflict
        """
        self.post_repository = post_repository
        self.max_retries = max_retries

    async def create_post(
        self, author_id: UserId, title: str, content: str, tags: list[str]
    ) -> Post:
        """Create a post with no comments or likes.

        Args:
            author_id: Author user ID
            title: Post title
            content: Post body
            tags: Tags in display order

        Returns:
            Stored post
        """
        with logfire.span(
            "post_service.create_post", author_id=str(author_id), title=title
        ):
            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                author_id=author_id,
                title=title,
                content=content,
                tags=tags,
                likes=[],
                comments=[],
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.add(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def list_posts(self) -> list[Post]:
        """List all posts, newest first."""
        with logfire.span("post_service.list_posts"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def update_post(
        self,
        post_id: PostId,
        actor_id: UserId,
        title: str | None = None,
        content: str | None = None,
        tags: list[str] | None = None,
    ) -> Post:
        """Update the supplied post fields. Only the author may update.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If actor is not the post author
        """
        return await self._mutate(
            post_id,
            ThreadPath(),
            actor_id,
            lambda post: post.revise(title=title, content=content, tags=tags),
            require_author=True,
            operation="update_post",
        )

    async def delete_post(self, post_id: PostId, actor_id: UserId) -> None:
        """Delete a post with all its comments and replies.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If actor is not the post author
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), actor_id=str(actor_id)
        ):
            post = await self.get_post(post_id)
            if post.author_id != actor_id:
                logfire.warn(
                    "Unauthorized post deletion",
                    post_id=str(post_id),
                    actor_id=str(actor_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(actor_id))

            if not await self.post_repository.delete(post_id):
                raise NotFoundError("Post", str(post_id))
            logfire.info(
                "Post deleted", post_id=str(post_id), comment_count=len(post.comments)
            )

    async def clear_posts(self) -> int:
        """Delete every post. Returns the number deleted."""
        with logfire.span("post_service.clear_posts"):
            deleted = await self.post_repository.delete_all()
            logfire.info("Posts cleared", deleted=deleted)
            return deleted

    async def add_comment(
        self, post_id: PostId, actor_id: UserId, content: str
    ) -> Post:
        """Append a comment by ``actor_id``. Any user may comment.

        Raises:
            NotFoundError: If post not found
        """
        now = datetime.now()
        comment = Comment(
            id=CommentId(uuid4()),
            author_id=actor_id,
            content=content,
            replies=[],
            created_at=now,
            updated_at=now,
        )
        return await self._mutate(
            post_id,
            ThreadPath(),
            actor_id,
            lambda post: post.with_comment(comment),
            require_author=False,
            operation="add_comment",
        )

    async def edit_comment(
        self, post_id: PostId, comment_id: CommentId, actor_id: UserId, content: str
    ) -> Post:
        """Replace a comment's content. Only the comment author may edit.

        Raises:
            NotFoundError: If post or comment not found
            NotAuthorizedError: If actor is not the comment author
        """
        return await self._mutate(
            post_id,
            ThreadPath(comment_id=comment_id),
            actor_id,
            lambda comment: comment.evolve(content=content),
            require_author=True,
            operation="edit_comment",
        )

    async def delete_comment(
        self, post_id: PostId, comment_id: CommentId, actor_id: UserId
    ) -> Post:
        """Remove a comment and its replies. Only the comment author may delete.

        Raises:
            NotFoundError: If post or comment not found
            NotAuthorizedError: If actor is not the comment author
        """
        return await self._mutate(
            post_id,
            ThreadPath(comment_id=comment_id),
            actor_id,
            lambda comment: None,
            require_author=True,
            operation="delete_comment",
        )

    async def add_reply(
        self, post_id: PostId, comment_id: CommentId, actor_id: UserId, content: str
    ) -> Post:
        """Append a reply to a comment. Any user may reply.

        Raises:
            NotFoundError: If post or comment not found
        """
        now = datetime.now()
        reply = Reply(
            id=ReplyId(uuid4()),
            author_id=actor_id,
            content=content,
            created_at=now,
            updated_at=now,
        )
        return await self._mutate(
            post_id,
            ThreadPath(comment_id=comment_id),
            actor_id,
            lambda comment: comment.with_reply(reply),
            require_author=False,
            operation="add_reply",
        )

    async def edit_reply(
        self,
        post_id: PostId,
        comment_id: CommentId,
        reply_id: ReplyId,
        actor_id: UserId,
        content: str,
    ) -> Post:
        """Replace a reply's content. Only the reply author may edit.

        Raises:
            NotFoundError: If post, comment or reply not found
            NotAuthorizedError: If actor is not the reply author
        """
        return await self._mutate(
            post_id,
            ThreadPath(comment_id=comment_id, reply_id=reply_id),
            actor_id,
            lambda reply: reply.evolve(content=content),
            require_author=True,
            operation="edit_reply",
        )

    async def delete_reply(
        self,
        post_id: PostId,
        comment_id: CommentId,
        reply_id: ReplyId,
        actor_id: UserId,
    ) -> Post:
        """Remove a reply. Only the reply author may delete.

        Raises:
            NotFoundError: If post, comment or reply not found
            NotAuthorizedError: If actor is not the reply author
        """
        return await self._mutate(
            post_id,
            ThreadPath(comment_id=comment_id, reply_id=reply_id),
            actor_id,
            lambda reply: None,
            require_author=True,
            operation="delete_reply",
        )

    async def toggle_like(self, post_id: PostId, actor_id: UserId) -> Post:
        """Like the post, or remove the like if ``actor_id`` already likes it.

        Raises:
            NotFoundError: If post not found
        """
        return await self._mutate(
            post_id,
            ThreadPath(),
            actor_id,
            lambda post: post.toggle_like(actor_id),
            require_author=False,
            operation="toggle_like",
        )

    async def _mutate(
        self,
        post_id: PostId,
        path: ThreadPath,
        actor_id: UserId,
        effect: ThreadEffect,
        *,
        require_author: bool,
        operation: str,
    ) -> Post:
        """Load, change and save a post, retrying on version conflicts.

        Args:
            post_id: Post to change
            path: Node inside the post the effect applies to
            actor_id: Authenticated user
            effect: Change applied to the located node
            require_author: Whether the actor must own the located node
            operation: Name used in logs and spans

        Returns:
            The saved post

        Raises:
            NotFoundError: If post, comment or reply not found
            NotAuthorizedError: If authorship is required and not held
            ConcurrentModificationError: If every attempt hit a conflict
        """
        with logfire.span(
            f"post_service.{operation}",
            post_id=str(post_id),
            actor_id=str(actor_id),
            comment_id=str(path.comment_id) if path.comment_id else None,
            reply_id=str(path.reply_id) if path.reply_id else None,
        ):
            attempts = self.max_retries + 1
            for attempt in range(1, attempts + 1):
                post = await self.get_post(post_id)

                try:
                    updated = post.apply(
                        path,
                        actor_id,
                        effect,
                        require_author=require_author,
                        now=datetime.now(),
                    )
                except (NotFoundError, NotAuthorizedError) as e:
                    logfire.warn(
                        f"{operation} rejected",
                        post_id=str(post_id),
                        actor_id=str(actor_id),
                        error=str(e),
                    )
                    raise

                try:
                    saved = await self.post_repository.save(updated)
                except ConcurrentModificationError:
                    logfire.warn(
                        "Post version conflict",
                        operation=operation,
                        post_id=str(post_id),
                        attempt=attempt,
                        max_attempts=attempts,
                    )
                    if attempt == attempts:
                        raise
                    continue

                logfire.info(
                    f"{operation} applied",
                    post_id=str(post_id),
                    version=saved.version,
                    attempt=attempt,
                )
                return saved

            # Unreachable: the last attempt either returns or raises
            raise ConcurrentModificationError("Post", str(post_id), post.version)
