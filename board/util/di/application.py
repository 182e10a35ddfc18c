"""Use case providers.

Use cases are built from their typed constructors, one per request.
"""

from dishka import Scope, provide

from board.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from board.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
    EditCommentUseCase,
)
from board.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    ToggleLikeUseCase,
    UpdatePostUseCase,
)
from board.application.usecase.reply import (
    AddReplyUseCase,
    DeleteReplyUseCase,
    EditReplyUseCase,
)
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Every use case the API routes depend on."""

    scope = Scope.REQUEST

    # Auth
    register = provide(RegisterUseCase)
    login = provide(LoginUseCase)
    current_user = provide(GetCurrentUserUseCase)

    # Posts
    create_post = provide(CreatePostUseCase)
    list_posts = provide(ListPostsUseCase)
    get_post = provide(GetPostUseCase)
    update_post = provide(UpdatePostUseCase)
    delete_post = provide(DeletePostUseCase)
    toggle_like = provide(ToggleLikeUseCase)

    # Comments
    add_comment = provide(AddCommentUseCase)
    edit_comment = provide(EditCommentUseCase)
    delete_comment = provide(DeleteCommentUseCase)

    # Replies
    add_reply = provide(AddReplyUseCase)
    edit_reply = provide(EditReplyUseCase)
    delete_reply = provide(DeleteReplyUseCase)
