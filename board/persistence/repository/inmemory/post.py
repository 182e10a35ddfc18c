"""In-memory post repository for testing."""

from typing import Optional

from board.domain.error import ConcurrentModificationError, NotFoundError
from board.domain.model.post import Post
from board.domain.repository.post import PostRepository
from board.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Saves are compare-and-swap on ``version``, same as the PostgreSQL one.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self) -> list[Post]:
        """Find all posts, newest first."""
        return sorted(self._posts.values(), key=lambda p: p.created_at, reverse=True)

    async def add(self, post: Post) -> Post:
        """Insert a new post at version 1."""
        stored = post.model_copy(update={"version": 1})
        self._posts[stored.id] = stored
        return stored

    async def save(self, post: Post) -> Post:
        """Replace the stored post if its version still matches."""
        current = self._posts.get(post.id)
        if current is None:
            raise NotFoundError("Post", str(post.id))
        if current.version != post.version:
            raise ConcurrentModificationError("Post", str(post.id), post.version)

        stored = post.model_copy(update={"version": post.version + 1})
        self._posts[stored.id] = stored
        return stored

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None

    async def delete_all(self) -> int:
        """Delete every post."""
        count = len(self._posts)
        self._posts.clear()
        return count
