"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from board.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from board.application.usecase.view import PostView
from board.domain.service import JWTService
from board.interface.api.auth import bearer_scheme, require_user_id
from board.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=20000)
    tags: list[str] = Field(default_factory=list)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post. Omitted fields stay unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    content: str | None = Field(default=None, min_length=1, max_length=20000)
    tags: list[str] | None = None


@router.get("", response_model=list[PostView])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostView]:
    """List all posts, newest first."""
    try:
        result = await list_posts_use_case.execute(ListPostsRequest())
    except Exception as e:
        raise to_http_exception(e, "fetching posts") from e
    return result.posts


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostView:
    """Get a single post with its comments and replies."""
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except Exception as e:
        raise to_http_exception(e, "fetching post") from e


@router.post("", response_model=PostView, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostView:
    """Create a new post.

    Requires authentication.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI
        jwt_service: JWT service for token verification (injected)
        credentials: Bearer token from the Authorization header

    Returns:
        Created post

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = require_user_id(jwt_service, credentials)

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                author_id=user_id,
                title=request.title,
                content=request.content,
                tags=request.tags,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "creating post") from e


@router.put("/{post_id}", response_model=PostView)
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostView:
    """Update a post's title, content or tags.

    Only the post author can edit.

    Raises:
        HTTPException: 401, 403, 404 or 409
    """
    user_id = require_user_id(jwt_service, credentials)

    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=post_id,
                user_id=user_id,
                title=request.title,
                content=request.content,
                tags=request.tags,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "updating post") from e


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeletePostResponse:
    """Delete a post with all of its comments and replies.

    Only the post author can delete.
    """
    user_id = require_user_id(jwt_service, credentials)

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id, user_id=user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "deleting post") from e


@router.post("/{post_id}/like", response_model=PostView)
async def toggle_like(
    post_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostView:
    """Like a post, or remove the like if already liked."""
    user_id = require_user_id(jwt_service, credentials)

    try:
        return await toggle_like_use_case.execute(
            ToggleLikeRequest(post_id=post_id, user_id=user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "toggling like") from e
