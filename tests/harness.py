"""Fixture factory for tests that resolve services from a container."""

import pytest_asyncio

from board.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Create a fixture yielding a request-scoped container.

    Each test gets a fresh container, so in-memory repositories start empty.

    Args:
        unmock: Components to resolve with their production implementation

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_comment(unit_env, u1):
            post_service = await unit_env.get(PostService)
            post = await post_service.create_post(u1, "Title", "Body", [])
    """

    @pytest_asyncio.fixture
    async def _env():
        container = build_test_container(unmock=unmock)

        async with container() as request_container:
            yield request_container

        await container.close()

    return _env
