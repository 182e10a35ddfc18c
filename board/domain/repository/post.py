"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.post import Post
from board.domain.value import PostId


class PostRepository(ABC):
    """Repository for the Post aggregate.

    Posts are always loaded and saved whole, comments and replies included.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find all posts, newest first by creation time.

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def add(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to insert

        Returns:
            The stored post with version 1
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Replace a stored post if its version is unchanged.

        ``post.version`` must be the version that was loaded. The stored
        version is incremented on success.

        Args:
            post: The modified post

        Returns:
            The stored post with its new version

        Raises:
            ConcurrentModificationError: If the stored version differs
            NotFoundError: If the post no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post together with its comments and replies.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted
        """
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every post.

        Returns:
            Number of posts deleted
        """
        pass
