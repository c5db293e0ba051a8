from typing import TYPE_CHECKING
from ...domain.repositories.ad_repository import AdRepository
from ...domain.repositories.comment_repository import CommentRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.comment import (
    ListCommentsUseCase,
    AddCommentUseCase,
    UpdateCommentUseCase,
    DeleteCommentUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CommentProvider:
    """Comment use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ListCommentsUseCase,
            lambda: ListCommentsUseCase(
                ad_repository=container.get(AdRepository),
                comment_repository=container.get(CommentRepository),
                user_repository=container.get(UserRepository),
            )
        )

        container.register_factory(
            AddCommentUseCase,
            lambda: AddCommentUseCase(
                ad_repository=container.get(AdRepository),
                comment_repository=container.get(CommentRepository),
                user_repository=container.get(UserRepository),
            )
        )

        container.register_factory(
            UpdateCommentUseCase,
            lambda: UpdateCommentUseCase(
                comment_repository=container.get(CommentRepository),
                user_repository=container.get(UserRepository),
            )
        )

        container.register_factory(
            DeleteCommentUseCase,
            lambda: DeleteCommentUseCase(
                comment_repository=container.get(CommentRepository)
            )
        )
