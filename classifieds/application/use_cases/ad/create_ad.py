# Standard library imports
import logging

# Local application imports
from ....domain.repositories.ad_repository import AdRepository
from ....domain.storage.image_storage import ImageStorage
from ....domain.models.ad import Ad
from ....domain.constants.media_constants import AD_IMAGE_SUBDIR
from ...dto.ad_dto import CreateOrUpdateAdRequest, AdResponse
from ...mappers import to_ad_response

logger = logging.getLogger(__name__)


class CreateAdUseCase:
    """Use case for posting a new ad with an image"""

    def __init__(self, ad_repository: AdRepository, image_storage: ImageStorage) -> None:
        self.ad_repository = ad_repository
        self.image_storage = image_storage

    async def execute(
        self,
        request: CreateOrUpdateAdRequest,
        author_id: int,
        content: bytes,
        filename: str,
    ) -> AdResponse:
        """
        Create an ad

        The ad is saved first so that its ID can key the stored image, then
        saved again with the image path. If the image cannot be written the
        ad record is deleted again before the error propagates.

        Args:
            request: Ad fields
            author_id: ID of the user posting the ad
            content: Raw image bytes
            filename: Original image file name

        Returns:
            AdResponse for the created ad

        Raises:
            ValueError: If the ad fields violate entity rules
            OSError: If the image cannot be written
        """
        new_ad = Ad(
            id=None,
            author_id=author_id,
            title=request.title,
            price=request.price,
            description=request.description,
        )
        saved_ad = await self.ad_repository.save(new_ad)

        try:
            saved_ad.image_path = self.image_storage.save_image(content, filename, saved_ad.id, AD_IMAGE_SUBDIR)
        except OSError:
            await self.ad_repository.delete(saved_ad.id)
            logger.warning(f"Image for new ad {saved_ad.id} could not be stored, ad removed")
            raise

        saved_ad = await self.ad_repository.save(saved_ad)

        logger.info(f"User {author_id} created ad {saved_ad.id}")
        return to_ad_response(saved_ad)
