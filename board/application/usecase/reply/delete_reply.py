"""Delete reply use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase, parse_id
from board.application.usecase.view import PostView, resolve_post_view
from board.domain.service import PostService, UserService
from board.domain.value import CommentId, PostId, ReplyId, UserId


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    post_id: str
    comment_id: str
    reply_id: str
    user_id: str  # Current user ID (must be reply author)


class DeleteReplyUseCase(BaseUseCase):
    """Use case for removing a reply."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: DeleteReplyRequest) -> PostView:
        """Execute delete reply flow.

        Raises:
            NotFoundError: If post, comment or reply not found
            NotAuthorizedError: If user didn't write the reply
        """
        post = await self.post_service.delete_reply(
            post_id=parse_id(request.post_id, PostId, "Post"),
            comment_id=parse_id(request.comment_id, CommentId, "Comment"),
            reply_id=parse_id(request.reply_id, ReplyId, "Reply"),
            actor_id=parse_id(request.user_id, UserId, "User"),
        )
        return await resolve_post_view(post, self.user_service)
