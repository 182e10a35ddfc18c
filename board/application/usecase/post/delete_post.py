"""Delete post use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase, parse_id
from board.domain.service import PostService
from board.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # Current user ID (must be author)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    message: str


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post with all of its comments and replies."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If user doesn't own the post
        """
        await self.post_service.delete_post(
            post_id=parse_id(request.post_id, PostId, "Post"),
            actor_id=parse_id(request.user_id, UserId, "User"),
        )
        return DeletePostResponse(message="Post deleted successfully")
