"""Reply use cases."""

from .add_reply import AddReplyRequest, AddReplyUseCase
from .delete_reply import DeleteReplyRequest, DeleteReplyUseCase
from .edit_reply import EditReplyRequest, EditReplyUseCase

__all__ = [
    "AddReplyRequest",
    "AddReplyUseCase",
    "DeleteReplyRequest",
    "DeleteReplyUseCase",
    "EditReplyRequest",
    "EditReplyUseCase",
]
