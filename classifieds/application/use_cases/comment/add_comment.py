# Standard library imports
import time

# Local application imports
from ....domain.repositories.ad_repository import AdRepository
from ....domain.repositories.comment_repository import CommentRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.comment import Comment
from ....domain.exceptions import RecordNotFoundError
from ...dto.comment_dto import CreateOrUpdateCommentRequest, CommentResponse
from ...mappers import to_comment_response


def current_time_millis() -> int:
    return int(time.time() * 1000)


class AddCommentUseCase:
    """Use case for commenting on an ad"""

    def __init__(
        self,
        ad_repository: AdRepository,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
    ) -> None:
        self.ad_repository = ad_repository
        self.comment_repository = comment_repository
        self.user_repository = user_repository

    async def execute(
        self,
        ad_id: int,
        request: CreateOrUpdateCommentRequest,
        author_id: int,
    ) -> CommentResponse:
        """
        Add a comment timestamped with the current time

        Raises:
            RecordNotFoundError: If the ad or the author does not exist
        """
        if await self.ad_repository.find_by_id(ad_id) is None:
            raise RecordNotFoundError("Ad not found")

        author = await self.user_repository.find_by_id(author_id)
        if author is None:
            raise RecordNotFoundError("User not found")

        comment = Comment(
            id=None,
            ad_id=ad_id,
            author_id=author_id,
            text=request.text,
            created_at=current_time_millis(),
        )
        saved_comment = await self.comment_repository.save(comment)
        return to_comment_response(saved_comment, author)
