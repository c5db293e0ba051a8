# Local application imports
from ....domain.repositories.comment_repository import CommentRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.comment import Comment
from ....domain.exceptions import RecordNotFoundError
from ...dto.comment_dto import CreateOrUpdateCommentRequest, CommentResponse
from ...dto.user_dto import UserResponse
from ...mappers import to_comment_response
from ..permissions import ensure_owner_or_admin


async def find_ad_comment(
    comment_repository: CommentRepository,
    ad_id: int,
    comment_id: int,
) -> Comment:
    """Load a comment and check that it belongs to the given ad"""
    comment = await comment_repository.find_by_id(comment_id)
    if comment is None or comment.ad_id != ad_id:
        raise RecordNotFoundError("Comment not found")
    return comment


class UpdateCommentUseCase:
    """Use case for editing the text of a comment"""

    def __init__(self, comment_repository: CommentRepository, user_repository: UserRepository) -> None:
        self.comment_repository = comment_repository
        self.user_repository = user_repository

    async def execute(
        self,
        ad_id: int,
        comment_id: int,
        request: CreateOrUpdateCommentRequest,
        current_user: UserResponse,
    ) -> CommentResponse:
        """
        Raises:
            RecordNotFoundError: If the comment does not exist on this ad
            AccessDeniedError: If the user is neither the author nor an admin
        """
        comment = await find_ad_comment(self.comment_repository, ad_id, comment_id)
        ensure_owner_or_admin(comment.author_id, current_user)

        comment.text = request.text
        saved_comment = await self.comment_repository.save(comment)

        author = await self.user_repository.find_by_id(saved_comment.author_id)
        return to_comment_response(saved_comment, author)
