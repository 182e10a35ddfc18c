"""Update post use case."""

from typing import Optional

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase, parse_id
from board.application.usecase.view import PostView, resolve_post_view
from board.domain.service import PostService, UserService
from board.domain.value import PostId, UserId


class UpdatePostRequest(BaseModel):
    """Update post request. Fields left as None are not changed."""

    post_id: str
    user_id: str  # Current user ID (must be author)
    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[list[str]] = None


class UpdatePostUseCase(BaseUseCase):
    """Use case for editing a post's title, content or tags."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: UpdatePostRequest) -> PostView:
        """Execute update post flow.

        Args:
            request: Update post request

        Returns:
            The updated post

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If user doesn't own the post
        """
        post = await self.post_service.update_post(
            post_id=parse_id(request.post_id, PostId, "Post"),
            actor_id=parse_id(request.user_id, UserId, "User"),
            title=request.title,
            content=request.content,
            tags=request.tags,
        )
        return await resolve_post_view(post, self.user_service)
