# Standard library imports
from typing import Dict, Optional

# Local application imports
from ....domain.repositories.ad_repository import AdRepository
from ....domain.repositories.comment_repository import CommentRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import RecordNotFoundError
from ...dto.comment_dto import CommentsResponse
from ...mappers import to_comment_response


class ListCommentsUseCase:
    """Use case for listing the comments on an ad"""

    def __init__(
        self,
        ad_repository: AdRepository,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
    ) -> None:
        self.ad_repository = ad_repository
        self.comment_repository = comment_repository
        self.user_repository = user_repository

    async def execute(self, ad_id: int) -> CommentsResponse:
        """
        Raises:
            RecordNotFoundError: If the ad does not exist
        """
        if await self.ad_repository.find_by_id(ad_id) is None:
            raise RecordNotFoundError("Ad not found")

        comments = await self.comment_repository.find_by_ad(ad_id)

        # Each author is looked up once
        authors: Dict[int, Optional[User]] = {}
        results = []
        for comment in comments:
            if comment.author_id not in authors:
                authors[comment.author_id] = await self.user_repository.find_by_id(comment.author_id)
            results.append(to_comment_response(comment, authors[comment.author_id]))

        return CommentsResponse(count=len(results), results=results)
