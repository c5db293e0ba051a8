# Standard library imports
import logging

# Local application imports
from ....domain.repositories.comment_repository import CommentRepository
from ...dto.user_dto import UserResponse
from ..permissions import ensure_owner_or_admin
from .update_comment import find_ad_comment

logger = logging.getLogger(__name__)


class DeleteCommentUseCase:
    """Use case for removing a comment"""

    def __init__(self, comment_repository: CommentRepository) -> None:
        self.comment_repository = comment_repository

    async def execute(self, ad_id: int, comment_id: int, current_user: UserResponse) -> None:
        comment = await find_ad_comment(self.comment_repository, ad_id, comment_id)
        ensure_owner_or_admin(comment.author_id, current_user)

        await self.comment_repository.delete(comment_id)
        logger.info(f"User {current_user.id} deleted comment {comment_id} on ad {ad_id}")
