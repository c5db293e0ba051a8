# Standard library imports
import logging

# Local application imports
from ....domain.repositories.ad_repository import AdRepository
from ....domain.repositories.comment_repository import CommentRepository
from ....domain.storage.image_storage import ImageStorage
from ....domain.exceptions import RecordNotFoundError
from ...dto.user_dto import UserResponse
from ..permissions import ensure_owner_or_admin

logger = logging.getLogger(__name__)


class DeleteAdUseCase:
    """Use case for removing an ad with its comments and image"""

    def __init__(
        self,
        ad_repository: AdRepository,
        comment_repository: CommentRepository,
        image_storage: ImageStorage,
    ) -> None:
        self.ad_repository = ad_repository
        self.comment_repository = comment_repository
        self.image_storage = image_storage

    async def execute(self, ad_id: int, current_user: UserResponse) -> None:
        """
        Raises:
            RecordNotFoundError: If the ad does not exist
            AccessDeniedError: If the user is neither the author nor an admin
        """
        ad = await self.ad_repository.find_by_id(ad_id)
        if ad is None:
            raise RecordNotFoundError("Ad not found")

        ensure_owner_or_admin(ad.author_id, current_user)

        removed_comments = await self.comment_repository.delete_by_ad(ad_id)
        await self.ad_repository.delete(ad_id)
        self.image_storage.delete_image(ad.image_path)

        logger.info(f"Deleted ad {ad_id} with {removed_comments} comment(s)")
