"""Create post use case."""

from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase, parse_id
from board.application.usecase.view import PostView, resolve_post_view
from board.domain.service import PostService, UserService
from board.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from authenticated user
    title: str
    content: str
    tags: list[str] = Field(default_factory=list)


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The created post with its author resolved

        Raises:
            NotFoundError: If the author does not exist
        """
        author_id = parse_id(request.author_id, UserId, "User")

        # Tokens can outlive their user
        await self.user_service.get_by_id(author_id)

        post = await self.post_service.create_post(
            author_id=author_id,
            title=request.title,
            content=request.content,
            tags=request.tags,
        )
        return await resolve_post_view(post, self.user_service)
