"""Delete comment use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase, parse_id
from board.application.usecase.view import PostView, resolve_post_view
from board.domain.service import PostService, UserService
from board.domain.value import CommentId, PostId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str
    comment_id: str
    user_id: str  # Current user ID (must be comment author)


class DeleteCommentUseCase(BaseUseCase):
    """Use case for removing a comment together with its replies."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: DeleteCommentRequest) -> PostView:
        """Execute delete comment flow.

        The post author gets no rights over other users' comments.

        Raises:
            NotFoundError: If post or comment not found
            NotAuthorizedError: If user didn't write the comment
        """
        post = await self.post_service.delete_comment(
            post_id=parse_id(request.post_id, PostId, "Post"),
            comment_id=parse_id(request.comment_id, CommentId, "Comment"),
            actor_id=parse_id(request.user_id, UserId, "User"),
        )
        return await resolve_post_view(post, self.user_service)
