from .list_comments import ListCommentsUseCase
from .add_comment import AddCommentUseCase
from .update_comment import UpdateCommentUseCase
from .delete_comment import DeleteCommentUseCase

__all__ = [
    "ListCommentsUseCase",
    "AddCommentUseCase",
    "UpdateCommentUseCase",
    "DeleteCommentUseCase",
]
