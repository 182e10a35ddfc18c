"""Unit tests for post, comment and reply use cases."""

from uuid import uuid4

import pytest

from board.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from board.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from board.application.usecase.reply import AddReplyRequest, AddReplyUseCase
from board.domain.error import NotAuthorizedError, NotFoundError
from board.domain.repository import UserRepository
from board.persistence.repository.inmemory import InMemoryUserRepository
from tests.factories import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed_users(unit_env, *usernames):
    user_repo = await unit_env.get(UserRepository)
    return [await user_repo.save(make_user(name)) for name in usernames]


async def _create_post(unit_env, author_id) -> str:
    create_post = await unit_env.get(CreatePostUseCase)
    view = await create_post.execute(
        CreatePostRequest(author_id=author_id, title="T", content="C", tags=["x"])
    )
    return view.id


class TestCreateAndGetPost:
    """Tests for CreatePostUseCase and GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_created_post_has_resolved_author(self, unit_env):
        """The response carries the author's id and username."""
        (alice,) = await _seed_users(unit_env, "alice")
        create_post = await unit_env.get(CreatePostUseCase)

        view = await create_post.execute(
            CreatePostRequest(
                author_id=str(alice.id), title="T", content="C", tags=["a"]
            )
        )

        assert view.author.id == str(alice.id)
        assert view.author.username == "alice"
        assert view.likes == []
        assert view.comments == []

    @pytest.mark.asyncio
    async def test_unknown_author_cannot_post(self, unit_env):
        """A token for a user that no longer exists cannot create posts."""
        create_post = await unit_env.get(CreatePostUseCase)

        with pytest.raises(NotFoundError, match="User not found"):
            await create_post.execute(
                CreatePostRequest(author_id=str(uuid4()), title="T", content="C")
            )

    @pytest.mark.asyncio
    async def test_malformed_post_id_is_not_found(self, unit_env):
        """Ids that are not UUIDs cannot name a post."""
        get_post = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError, match="Post not found"):
            await get_post.execute(GetPostRequest(post_id="not-a-uuid"))


class TestAuthorResolution:
    """Tests for username resolution at the read boundary."""

    @pytest.mark.asyncio
    async def test_thread_authors_are_resolved(self, unit_env):
        """Post, comment and reply authors all come back with usernames."""
        alice, bob = await _seed_users(unit_env, "alice", "bob")
        post_id = await _create_post(unit_env, str(alice.id))

        add_comment = await unit_env.get(AddCommentUseCase)
        view = await add_comment.execute(
            AddCommentRequest(post_id=post_id, author_id=str(bob.id), content="nice")
        )
        add_reply = await unit_env.get(AddReplyUseCase)
        view = await add_reply.execute(
            AddReplyRequest(
                post_id=post_id,
                comment_id=view.comments[0].id,
                author_id=str(alice.id),
                content="thanks",
            )
        )

        comment = view.comments[0]
        assert view.author.username == "alice"
        assert comment.author.username == "bob"
        assert comment.replies[0].author.username == "alice"
        assert comment.replies[0].content == "thanks"

    @pytest.mark.asyncio
    async def test_deleted_user_resolves_to_null_username(self, unit_env):
        """Authors missing from the directory keep their id, username None."""
        alice, bob = await _seed_users(unit_env, "alice", "bob")
        post_id = await _create_post(unit_env, str(alice.id))
        add_comment = await unit_env.get(AddCommentUseCase)
        await add_comment.execute(
            AddCommentRequest(post_id=post_id, author_id=str(bob.id), content="hi")
        )

        user_repo = await unit_env.get(UserRepository)
        assert isinstance(user_repo, InMemoryUserRepository)
        await user_repo.remove(bob.id)

        get_post = await unit_env.get(GetPostUseCase)
        view = await get_post.execute(GetPostRequest(post_id=post_id))

        assert view.comments[0].author.id == str(bob.id)
        assert view.comments[0].author.username is None
        assert view.author.username == "alice"

    @pytest.mark.asyncio
    async def test_list_posts_resolves_every_post(self, unit_env):
        """Listing resolves authors across all posts."""
        alice, bob = await _seed_users(unit_env, "alice", "bob")
        await _create_post(unit_env, str(alice.id))
        await _create_post(unit_env, str(bob.id))

        list_posts = await unit_env.get(ListPostsUseCase)
        result = await list_posts.execute(ListPostsRequest())

        assert sorted(p.author.username for p in result.posts) == ["alice", "bob"]


class TestMutations:
    """Tests for update, like and delete use cases."""

    @pytest.mark.asyncio
    async def test_update_by_other_user_is_forbidden(self, unit_env):
        """Only the author can update a post."""
        alice, bob = await _seed_users(unit_env, "alice", "bob")
        post_id = await _create_post(unit_env, str(alice.id))
        update_post = await unit_env.get(UpdatePostUseCase)

        with pytest.raises(NotAuthorizedError):
            await update_post.execute(
                UpdatePostRequest(post_id=post_id, user_id=str(bob.id), title="x")
            )

        get_post = await unit_env.get(GetPostUseCase)
        assert (await get_post.execute(GetPostRequest(post_id=post_id))).title == "T"

    @pytest.mark.asyncio
    async def test_toggle_like_returns_user_ids(self, unit_env):
        """Likes are exposed as user id strings."""
        alice, bob = await _seed_users(unit_env, "alice", "bob")
        post_id = await _create_post(unit_env, str(alice.id))
        toggle_like = await unit_env.get(ToggleLikeUseCase)

        view = await toggle_like.execute(
            ToggleLikeRequest(post_id=post_id, user_id=str(bob.id))
        )

        assert view.likes == [str(bob.id)]

    @pytest.mark.asyncio
    async def test_delete_comment_with_malformed_id_is_not_found(self, unit_env):
        """A malformed comment id reports the comment as missing."""
        (alice,) = await _seed_users(unit_env, "alice")
        post_id = await _create_post(unit_env, str(alice.id))
        delete_comment = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await delete_comment.execute(
                DeleteCommentRequest(
                    post_id=post_id, comment_id="nonexistent", user_id=str(alice.id)
                )
            )

    @pytest.mark.asyncio
    async def test_delete_post(self, unit_env):
        """Deleting returns a confirmation and the post is gone."""
        (alice,) = await _seed_users(unit_env, "alice")
        post_id = await _create_post(unit_env, str(alice.id))
        delete_post = await unit_env.get(DeletePostUseCase)

        result = await delete_post.execute(
            DeletePostRequest(post_id=post_id, user_id=str(alice.id))
        )

        assert result.message == "Post deleted successfully"
        get_post = await unit_env.get(GetPostUseCase)
        with pytest.raises(NotFoundError):
            await get_post.execute(GetPostRequest(post_id=post_id))
