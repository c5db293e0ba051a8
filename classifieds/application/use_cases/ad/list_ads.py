# Local application imports
from ....domain.repositories.ad_repository import AdRepository
from ...dto.ad_dto import AdsResponse
from ...mappers import to_ads_response


class ListAdsUseCase:
    """Use case for listing all ads"""

    def __init__(self, ad_repository: AdRepository) -> None:
        self.ad_repository = ad_repository

    async def execute(self) -> AdsResponse:
        ads = await self.ad_repository.find_all()
        return to_ads_response(ads)


class ListUserAdsUseCase:
    """Use case for listing the ads posted by one user"""

    def __init__(self, ad_repository: AdRepository) -> None:
        self.ad_repository = ad_repository

    async def execute(self, author_id: int) -> AdsResponse:
        ads = await self.ad_repository.find_by_author(author_id)
        return to_ads_response(ads)
