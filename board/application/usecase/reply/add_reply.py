"""Add reply use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase, parse_id
from board.application.usecase.view import PostView, resolve_post_view
from board.domain.service import PostService, UserService
from board.domain.value import CommentId, PostId, UserId


class AddReplyRequest(BaseModel):
    """Add reply request."""

    post_id: str
    comment_id: str
    author_id: str  # User ID from authenticated user
    content: str


class AddReplyUseCase(BaseUseCase):
    """Use case for replying to a comment."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize add reply use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: AddReplyRequest) -> PostView:
        """Execute add reply flow.

        Args:
            request: Add reply request

        Returns:
            The whole post, new reply last in its comment

        Raises:
            NotFoundError: If post or comment not found
        """
        post = await self.post_service.add_reply(
            post_id=parse_id(request.post_id, PostId, "Post"),
            comment_id=parse_id(request.comment_id, CommentId, "Comment"),
            actor_id=parse_id(request.author_id, UserId, "User"),
            content=request.content,
        )
        return await resolve_post_view(post, self.user_service)
