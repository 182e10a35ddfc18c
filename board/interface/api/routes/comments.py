"""Comment and reply routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from board.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
)
from board.application.usecase.reply import (
    AddReplyRequest,
    AddReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
    EditReplyRequest,
    EditReplyUseCase,
)
from board.application.usecase.view import PostView
from board.domain.service import JWTService
from board.interface.api.auth import bearer_scheme, require_user_id
from board.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class ContentAPIRequest(BaseModel):
    """API request carrying comment or reply text."""

    content: str = Field(min_length=1, max_length=10000)


@router.post(
    "/{post_id}/comments",
    response_model=PostView,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: str,
    request: ContentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostView:
    """Comment on a post.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment text
        add_comment_use_case: Add comment use case from DI
        jwt_service: JWT service for token verification (injected)
        credentials: Bearer token from the Authorization header

    Returns:
        The whole post including the new comment
    """
    user_id = require_user_id(jwt_service, credentials)

    try:
        return await add_comment_use_case.execute(
            AddCommentRequest(
                post_id=post_id, author_id=user_id, content=request.content
            )
        )
    except Exception as e:
        raise to_http_exception(e, "adding comment") from e


@router.put("/{post_id}/comments/{comment_id}", response_model=PostView)
async def edit_comment(
    post_id: str,
    comment_id: str,
    request: ContentAPIRequest,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostView:
    """Edit a comment. Only the comment author can edit."""
    user_id = require_user_id(jwt_service, credentials)

    try:
        return await edit_comment_use_case.execute(
            EditCommentRequest(
                post_id=post_id,
                comment_id=comment_id,
                user_id=user_id,
                content=request.content,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "editing comment") from e


@router.delete("/{post_id}/comments/{comment_id}", response_model=PostView)
async def delete_comment(
    post_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostView:
    """Delete a comment and its replies. Only the comment author can delete."""
    user_id = require_user_id(jwt_service, credentials)

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(
                post_id=post_id, comment_id=comment_id, user_id=user_id
            )
        )
    except Exception as e:
        raise to_http_exception(e, "deleting comment") from e


@router.post(
    "/{post_id}/comments/{comment_id}/replies",
    response_model=PostView,
    status_code=status.HTTP_201_CREATED,
)
async def add_reply(
    post_id: str,
    comment_id: str,
    request: ContentAPIRequest,
    add_reply_use_case: FromDishka[AddReplyUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostView:
    """Reply to a comment.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, credentials)

    try:
        return await add_reply_use_case.execute(
            AddReplyRequest(
                post_id=post_id,
                comment_id=comment_id,
                author_id=user_id,
                content=request.content,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "adding reply") from e


@router.put(
    "/{post_id}/comments/{comment_id}/replies/{reply_id}", response_model=PostView
)
async def edit_reply(
    post_id: str,
    comment_id: str,
    reply_id: str,
    request: ContentAPIRequest,
    edit_reply_use_case: FromDishka[EditReplyUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostView:
    """Edit a reply. Only the reply author can edit."""
    user_id = require_user_id(jwt_service, credentials)

    try:
        return await edit_reply_use_case.execute(
            EditReplyRequest(
                post_id=post_id,
                comment_id=comment_id,
                reply_id=reply_id,
                user_id=user_id,
                content=request.content,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "editing reply") from e


@router.delete(
    "/{post_id}/comments/{comment_id}/replies/{reply_id}", response_model=PostView
)
async def delete_reply(
    post_id: str,
    comment_id: str,
    reply_id: str,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostView:
    """Delete a reply. Only the reply author can delete."""
    user_id = require_user_id(jwt_service, credentials)

    try:
        return await delete_reply_use_case.execute(
            DeleteReplyRequest(
                post_id=post_id,
                comment_id=comment_id,
                reply_id=reply_id,
                user_id=user_id,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "deleting reply") from e
