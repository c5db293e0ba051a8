# Standard library imports
import logging

# Local application imports
from ....domain.repositories.ad_repository import AdRepository
from ....domain.storage.image_storage import ImageStorage
from ....domain.exceptions import RecordNotFoundError
from ....domain.constants.media_constants import AD_IMAGE_SUBDIR
from ...dto.ad_dto import AdResponse
from ...dto.user_dto import UserResponse
from ...mappers import to_ad_response
from ..permissions import ensure_owner_or_admin

logger = logging.getLogger(__name__)


class UpdateAdImageUseCase:
    """Use case for replacing the image of an ad"""

    def __init__(self, ad_repository: AdRepository, image_storage: ImageStorage) -> None:
        self.ad_repository = ad_repository
        self.image_storage = image_storage

    async def execute(
        self,
        ad_id: int,
        content: bytes,
        filename: str,
        current_user: UserResponse,
    ) -> AdResponse:
        """
        Delete the old image, store the new one and update the ad

        Raises:
            RecordNotFoundError: If the ad does not exist
            AccessDeniedError: If the user is neither the author nor an admin
            OSError: If the new image cannot be written
        """
        ad = await self.ad_repository.find_by_id(ad_id)
        if ad is None:
            raise RecordNotFoundError("Ad not found")

        ensure_owner_or_admin(ad.author_id, current_user)

        self.image_storage.delete_image(ad.image_path)
        ad.image_path = self.image_storage.save_image(content, filename, ad.id, AD_IMAGE_SUBDIR)

        saved_ad = await self.ad_repository.save(ad)
        logger.info(f"Image updated for ad {ad_id}: {saved_ad.image_path}")
        return to_ad_response(saved_ad)


class DownloadAdImageUseCase:
    """Use case for reading the image bytes of an ad"""

    def __init__(self, ad_repository: AdRepository, image_storage: ImageStorage) -> None:
        self.ad_repository = ad_repository
        self.image_storage = image_storage

    async def execute(self, ad_id: int) -> bytes:
        ad = await self.ad_repository.find_by_id(ad_id)
        if ad is None:
            raise RecordNotFoundError("Ad not found")
        if not ad.image_path:
            raise RecordNotFoundError("Ad has no image")
        return self.image_storage.read_image(ad.image_path)
