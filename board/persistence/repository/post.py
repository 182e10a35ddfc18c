"""PostgreSQL implementation of the Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.error import ConcurrentModificationError, NotFoundError
from board.domain.model import Post
from board.domain.repository.post import PostRepository
from board.domain.value import PostId
from board.persistence.mappers import post_to_row, row_to_post
from board.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    Saves are a single ``UPDATE ... WHERE id = :id AND version = :loaded``;
    zero affected rows means another writer got there first.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            return row_to_post(row._asdict())

    async def find_all(self) -> List[Post]:
        """Find all posts, newest first."""
        with logfire.span("post_repository.find_all"):
            stmt = select(posts_table).order_by(desc(posts_table.c.created_at))
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def add(self, post: Post) -> Post:
        """Insert a new post at version 1."""
        with logfire.span("post_repository.add", post_id=str(post.id)):
            stored = post.model_copy(update={"version": 1})
            await self.session.execute(insert(posts_table).values(**post_to_row(stored)))
            await self.session.flush()
            return stored

    async def save(self, post: Post) -> Post:
        """Replace the stored post if its version still matches."""
        with logfire.span(
            "post_repository.save", post_id=str(post.id), expected_version=post.version
        ):
            stored = post.model_copy(update={"version": post.version + 1})
            row = post_to_row(stored)

            stmt = (
                update(posts_table)
                .where(
                    posts_table.c.id == post.id,
                    posts_table.c.version == post.version,
                )
                .values(
                    document=row["document"],
                    version=row["version"],
                    updated_at=row["updated_at"],
                )
            )
            result = await self.session.execute(stmt)

            if result.rowcount == 0:
                exists = await self.session.scalar(
                    select(func.count())
                    .select_from(posts_table)
                    .where(posts_table.c.id == post.id)
                )
                if not exists:
                    raise NotFoundError("Post", str(post.id))
                raise ConcurrentModificationError("Post", str(post.id), post.version)

            await self.session.flush()
            return stored

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post row (comments and replies live inside it)."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            result = await self.session.execute(
                delete(posts_table).where(posts_table.c.id == post_id)
            )
            return result.rowcount > 0

    async def delete_all(self) -> int:
        """Delete every post row."""
        with logfire.span("post_repository.delete_all"):
            result = await self.session.execute(delete(posts_table))
            return result.rowcount
