"""List posts use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.view import PostView, resolve_post_views
from board.domain.service import PostService, UserService


class ListPostsRequest(BaseModel):
    """List posts request."""

    pass


class ListPostsResponse(BaseModel):
    """List posts response, newest first."""

    posts: list[PostView]


class ListPostsUseCase(BaseUseCase):
    """Use case for listing every post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Return all posts with authors resolved in one lookup."""
        posts = await self.post_service.list_posts()
        views = await resolve_post_views(posts, self.user_service)
        return ListPostsResponse(posts=views)
