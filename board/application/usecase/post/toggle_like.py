"""Toggle like use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase, parse_id
from board.application.usecase.view import PostView, resolve_post_view
from board.domain.service import PostService, UserService
from board.domain.value import PostId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    post_id: str
    user_id: str


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking a post, or unliking it when already liked."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: ToggleLikeRequest) -> PostView:
        """Execute toggle like flow.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.post_service.toggle_like(
            post_id=parse_id(request.post_id, PostId, "Post"),
            actor_id=parse_id(request.user_id, UserId, "User"),
        )
        return await resolve_post_view(post, self.user_service)
