"""Unit tests for PostService."""

from datetime import datetime
from uuid import uuid4

import pytest

from board.domain.error import (
    ConcurrentModificationError,
    NotAuthorizedError,
    NotFoundError,
)
from board.domain.model import Post
from board.domain.repository import PostRepository
from board.domain.service import PostService
from board.domain.value import CommentId, PostId, ReplyId, UserId
from board.persistence.repository.inmemory import InMemoryPostRepository
from tests.factories import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class RacingPostRepository(InMemoryPostRepository):
    """Lets another writer save first, ``races`` times in a row."""

    def __init__(self, rival_id: UserId, races: int) -> None:
        super().__init__()
        self.rival_id = rival_id
        self.races = races
        self.save_calls = 0

    async def save(self, post: Post) -> Post:
        self.save_calls += 1
        if self.races > 0:
            self.races -= 1
            current = await self.find_by_id(post.id)
            await super().save(current.toggle_like(self.rival_id))
        return await super().save(post)


class TestCreateAndRead:
    """Tests for create_post, get_post and list_posts."""

    @pytest.mark.asyncio
    async def test_create_post_starts_empty_at_version_one(self, unit_env, u1):
        """A new post has no comments or likes and version 1."""
        post_service = await unit_env.get(PostService)

        post = await post_service.create_post(u1, "T", "C", ["a", "b"])

        assert post.author_id == u1
        assert post.tags == ["a", "b"]
        assert post.comments == []
        assert post.likes == []
        assert post.version == 1
        assert post.created_at == post.updated_at

    @pytest.mark.asyncio
    async def test_get_missing_post_raises_not_found(self, unit_env):
        """Reading an unknown post id should raise NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await post_service.get_post(PostId(uuid4()))

    @pytest.mark.asyncio
    async def test_create_then_get_round_trips(self, unit_env, u1):
        """get_post returns what create_post stored."""
        post_service = await unit_env.get(PostService)

        created = await post_service.create_post(u1, "T", "C", ["x"])
        fetched = await post_service.get_post(created.id)

        assert fetched == created

    @pytest.mark.asyncio
    async def test_list_posts_newest_first(self, unit_env, u1):
        """Posts are listed by creation time, newest first."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        older = await post_repo.add(
            make_post(u1, title="Older", created_at=datetime(2024, 1, 1))
        )
        newer = await post_repo.add(
            make_post(u1, title="Newer", created_at=datetime(2024, 2, 1))
        )

        posts = await post_service.list_posts()

        assert [p.id for p in posts] == [newer.id, older.id]


class TestUpdateAndDelete:
    """Tests for update_post, delete_post and clear_posts."""

    @pytest.mark.asyncio
    async def test_update_applies_only_supplied_fields(self, unit_env, u1):
        """Fields left as None stay unchanged."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(u1, "T", "C", ["a"])

        updated = await post_service.update_post(post.id, u1, title="New title")

        assert updated.title == "New title"
        assert updated.content == "C"
        assert updated.tags == ["a"]
        assert updated.version == 2
        assert updated.updated_at >= post.updated_at

    @pytest.mark.asyncio
    async def test_unauthorized_update_leaves_post_unchanged(self, unit_env, u1, u2):
        """A non-author update fails and nothing is written."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(u1, "T", "C", [])

        with pytest.raises(NotAuthorizedError):
            await post_service.update_post(post.id, u2, title="x")

        stored = await post_service.get_post(post.id)
        assert stored.title == "T"
        assert stored.version == 1

    @pytest.mark.asyncio
    async def test_delete_post_by_author(self, unit_env, u1, u2):
        """The author can delete the post with all its comments."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(u1, "T", "C", [])
        await post_service.add_comment(post.id, u2, "nice")

        await post_service.delete_post(post.id, u1)

        with pytest.raises(NotFoundError):
            await post_service.get_post(post.id)

    @pytest.mark.asyncio
    async def test_mutations_on_deleted_post_are_not_found(self, unit_env, u1, u2):
        """A deleted post and everything in it is gone for every operation."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(u1, "T", "C", [])
        post = await post_service.add_comment(post.id, u2, "nice")
        comment_id = post.comments[0].id

        await post_service.delete_post(post.id, u1)

        with pytest.raises(NotFoundError, match="Post not found"):
            await post_service.add_comment(post.id, u2, "still there?")
        with pytest.raises(NotFoundError, match="Post not found"):
            await post_service.toggle_like(post.id, u2)
        with pytest.raises(NotFoundError, match="Post not found"):
            await post_service.edit_comment(post.id, comment_id, u2, "edited")

    @pytest.mark.asyncio
    async def test_delete_post_by_other_user_is_forbidden(self, unit_env, u1, u2):
        """Only the author can delete a post."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(u1, "T", "C", [])

        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(post.id, u2)

        assert await post_service.get_post(post.id)

    @pytest.mark.asyncio
    async def test_clear_posts_removes_everything(self, unit_env, u1):
        """clear_posts deletes every post and reports how many."""
        post_service = await unit_env.get(PostService)
        await post_service.create_post(u1, "A", "C", [])
        await post_service.create_post(u1, "B", "C", [])

        deleted = await post_service.clear_posts()

        assert deleted == 2
        assert await post_service.list_posts() == []


class TestThreadMutations:
    """Tests for comments, replies and likes."""

    @pytest.mark.asyncio
    async def test_comment_then_reply(self, unit_env, u1, u2):
        """A comment and a reply end up nested, with their own authors."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(u1, "T", "C", [])

        with_comment = await post_service.add_comment(post.id, u2, "nice")
        comment_id = with_comment.comments[0].id
        await post_service.add_reply(post.id, comment_id, u1, "thanks")

        stored = await post_service.get_post(post.id)
        assert len(stored.comments) == 1
        comment = stored.comments[0]
        assert (comment.content, comment.author_id) == ("nice", u2)
        assert len(comment.replies) == 1
        reply = comment.replies[0]
        assert (reply.content, reply.author_id) == ("thanks", u1)

    @pytest.mark.asyncio
    async def test_comment_ids_are_unique(self, unit_env, u1, u2):
        """Repeated comments get distinct ids."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(u1, "T", "C", [])

        for i in range(5):
            post = await post_service.add_comment(post.id, u2, f"comment {i}")

        ids = [c.id for c in post.comments]
        assert len(set(ids)) == 5
        assert post.comments[-1].content == "comment 4"

    @pytest.mark.asyncio
    async def test_edit_comment_by_author(self, unit_env, u1, u2):
        """The comment author can edit it."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(u1, "T", "C", [])
        post = await post_service.add_comment(post.id, u2, "nice")
        comment_id = post.comments[0].id

        post = await post_service.edit_comment(post.id, comment_id, u2, "very nice")

        assert post.comments[0].content == "very nice"

    @pytest.mark.asyncio
    async def test_post_author_cannot_delete_others_comment(self, unit_env, u1, u2):
        """Owning the post grants no rights over other users' comments."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(u1, "T", "C", [])
        post = await post_service.add_comment(post.id, u2, "nice")

        with pytest.raises(NotAuthorizedError):
            await post_service.delete_comment(post.id, post.comments[0].id, u1)

        assert len((await post_service.get_post(post.id)).comments) == 1

    @pytest.mark.asyncio
    async def test_delete_missing_comment_is_not_found(self, unit_env, u1):
        """Deleting an unknown comment fails without changing the post."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(u1, "T", "C", [])

        with pytest.raises(NotFoundError, match="Comment not found"):
            await post_service.delete_comment(post.id, CommentId(uuid4()), u1)

        assert await post_service.get_post(post.id) == post

    @pytest.mark.asyncio
    async def test_reply_on_missing_post_is_not_found(self, unit_env, u1):
        """Replying on an unknown post reports the post as missing."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await post_service.add_reply(
                PostId(uuid4()), CommentId(uuid4()), u1, "hello"
            )

    @pytest.mark.asyncio
    async def test_edit_and_delete_reply(self, unit_env, u1, u2):
        """Reply authors can edit and delete their replies."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(u1, "T", "C", [])
        post = await post_service.add_comment(post.id, u1, "question?")
        comment_id = post.comments[0].id
        post = await post_service.add_reply(post.id, comment_id, u2, "answer")
        reply_id = post.comments[0].replies[0].id

        post = await post_service.edit_reply(
            post.id, comment_id, reply_id, u2, "better answer"
        )
        assert post.comments[0].replies[0].content == "better answer"

        with pytest.raises(NotAuthorizedError):
            await post_service.delete_reply(post.id, comment_id, reply_id, u1)

        post = await post_service.delete_reply(post.id, comment_id, reply_id, u2)
        assert post.comments[0].replies == []

    @pytest.mark.asyncio
    async def test_comment_author_cannot_edit_others_reply(self, unit_env, u1, u2):
        """Owning the comment grants no rights over replies to it."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(u1, "T", "C", [])
        post = await post_service.add_comment(post.id, u1, "question?")
        comment_id = post.comments[0].id
        post = await post_service.add_reply(post.id, comment_id, u2, "answer")
        reply_id = post.comments[0].replies[0].id

        with pytest.raises(NotAuthorizedError):
            await post_service.edit_reply(post.id, comment_id, reply_id, u1, "hijack")

        stored = await post_service.get_post(post.id)
        assert stored.comments[0].replies[0].content == "answer"
        assert stored.version == post.version

    @pytest.mark.asyncio
    async def test_replies_unreachable_after_comment_delete(self, unit_env, u1, u2):
        """Deleting a comment takes its replies with it."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(u1, "T", "C", [])
        post = await post_service.add_comment(post.id, u1, "question?")
        comment_id = post.comments[0].id
        post = await post_service.add_reply(post.id, comment_id, u2, "answer")
        reply_id = post.comments[0].replies[0].id

        await post_service.delete_comment(post.id, comment_id, u1)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await post_service.edit_reply(post.id, comment_id, reply_id, u2, "x")
        with pytest.raises(NotFoundError, match="Comment not found"):
            await post_service.delete_reply(post.id, comment_id, reply_id, u2)
        with pytest.raises(NotFoundError, match="Comment not found"):
            await post_service.add_reply(post.id, comment_id, u2, "again")

    @pytest.mark.asyncio
    async def test_delete_missing_reply_is_not_found(self, unit_env, u1):
        """Deleting an unknown reply reports the reply as missing."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(u1, "T", "C", [])
        post = await post_service.add_comment(post.id, u1, "hi")

        with pytest.raises(NotFoundError, match="Reply not found"):
            await post_service.delete_reply(
                post.id, post.comments[0].id, ReplyId(uuid4()), u1
            )

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env, u1, u2):
        """Toggling twice restores the original likes."""
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(u1, "T", "C", [])

        liked = await post_service.toggle_like(post.id, u2)
        assert liked.likes == [u2]

        unliked = await post_service.toggle_like(post.id, u2)
        assert unliked.likes == []

    @pytest.mark.asyncio
    async def test_every_mutation_bumps_version(self, unit_env, u1, u2):
        """Each saved change increments the version by one."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_service.create_post(u1, "T", "C", [])

        await post_service.toggle_like(post.id, u2)
        await post_service.add_comment(post.id, u2, "nice")

        stored = await post_repo.find_by_id(post.id)
        assert stored.version == 3


class TestConcurrentModification:
    """Tests for the compare-and-swap retry loop."""

    @pytest.mark.asyncio
    async def test_conflicting_write_is_retried_and_both_kept(self, u1, u2):
        """A lost race is retried from a fresh load, keeping the rival change."""
        rival = UserId(uuid4())
        repo = RacingPostRepository(rival_id=rival, races=1)
        post_service = PostService(post_repository=repo, max_retries=3)
        post = await post_service.create_post(u1, "T", "C", [])

        result = await post_service.add_comment(post.id, u2, "nice")

        assert result.likes == [rival]
        assert [c.content for c in result.comments] == ["nice"]
        assert repo.save_calls == 2
        assert result.version == 3

    @pytest.mark.asyncio
    async def test_gives_up_after_max_retries(self, u1, u2):
        """When every attempt conflicts the caller gets ConcurrentModificationError."""
        repo = RacingPostRepository(rival_id=UserId(uuid4()), races=10)
        post_service = PostService(post_repository=repo, max_retries=2)
        post = await post_service.create_post(u1, "T", "C", [])

        with pytest.raises(ConcurrentModificationError):
            await post_service.toggle_like(post.id, u2)

        assert repo.save_calls == 3

    @pytest.mark.asyncio
    async def test_not_found_is_not_retried(self, u1):
        """Terminal errors stop the loop on the first attempt."""
        repo = RacingPostRepository(rival_id=UserId(uuid4()), races=10)
        post_service = PostService(post_repository=repo, max_retries=3)
        post = await post_service.create_post(u1, "T", "C", [])

        with pytest.raises(NotFoundError):
            await post_service.edit_comment(post.id, CommentId(uuid4()), u1, "x")

        assert repo.save_calls == 0
