# Local application imports
from ....domain.repositories.ad_repository import AdRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import RecordNotFoundError
from ...dto.ad_dto import ExtendedAdResponse
from ...mappers import to_extended_ad_response


class GetAdUseCase:
    """Use case for getting one ad together with its author's contacts"""

    def __init__(self, ad_repository: AdRepository, user_repository: UserRepository) -> None:
        self.ad_repository = ad_repository
        self.user_repository = user_repository

    async def execute(self, ad_id: int) -> ExtendedAdResponse:
        """
        Get an ad by ID

        Raises:
            RecordNotFoundError: If the ad or its author does not exist
        """
        ad = await self.ad_repository.find_by_id(ad_id)
        if ad is None:
            raise RecordNotFoundError("Ad not found")

        author = await self.user_repository.find_by_id(ad.author_id)
        if author is None:
            raise RecordNotFoundError("Ad author not found")

        return to_extended_ad_response(ad, author)
