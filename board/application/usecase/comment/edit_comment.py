"""Edit comment use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase, parse_id
from board.application.usecase.view import PostView, resolve_post_view
from board.domain.service import PostService, UserService
from board.domain.value import CommentId, PostId, UserId


class EditCommentRequest(BaseModel):
    """Edit comment request."""

    post_id: str
    comment_id: str
    user_id: str  # Current user ID (must be comment author)
    content: str


class EditCommentUseCase(BaseUseCase):
    """Use case for replacing a comment's content."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: EditCommentRequest) -> PostView:
        """Execute edit comment flow.

        Raises:
            NotFoundError: If post or comment not found
            NotAuthorizedError: If user didn't write the comment
        """
        post = await self.post_service.edit_comment(
            post_id=parse_id(request.post_id, PostId, "Post"),
            comment_id=parse_id(request.comment_id, CommentId, "Comment"),
            actor_id=parse_id(request.user_id, UserId, "User"),
            content=request.content,
        )
        return await resolve_post_view(post, self.user_service)
