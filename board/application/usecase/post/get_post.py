"""Get post use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase, parse_id
from board.application.usecase.view import PostView, resolve_post_view
from board.domain.service import PostService, UserService
from board.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostUseCase(BaseUseCase):
    """Use case for reading one post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Execute get post flow.

        Raises:
            NotFoundError: If post not found
        """
        post_id = parse_id(request.post_id, PostId, "Post")
        post = await self.post_service.get_post(post_id)
        return await resolve_post_view(post, self.user_service)
