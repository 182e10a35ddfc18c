"""Add comment use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase, parse_id
from board.application.usecase.view import PostView, resolve_post_view
from board.domain.service import PostService, UserService
from board.domain.value import PostId, UserId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    post_id: str
    author_id: str  # User ID from authenticated user
    content: str


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize add comment use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> PostView:
        """Execute add comment flow.

        Args:
            request: Add comment request

        Returns:
            The whole post, new comment last

        Raises:
            NotFoundError: If post not found
        """
        post = await self.post_service.add_comment(
            post_id=parse_id(request.post_id, PostId, "Post"),
            actor_id=parse_id(request.author_id, UserId, "User"),
            content=request.content,
        )
        return await resolve_post_view(post, self.user_service)
