# Local application imports
from ....domain.repositories.ad_repository import AdRepository
from ....domain.exceptions import RecordNotFoundError
from ...dto.ad_dto import CreateOrUpdateAdRequest, AdResponse
from ...dto.user_dto import UserResponse
from ...mappers import to_ad_response
from ..permissions import ensure_owner_or_admin


class UpdateAdUseCase:
    """Use case for editing the title, price and description of an ad"""

    def __init__(self, ad_repository: AdRepository) -> None:
        self.ad_repository = ad_repository

    async def execute(
        self,
        ad_id: int,
        request: CreateOrUpdateAdRequest,
        current_user: UserResponse,
    ) -> AdResponse:
        """
        Raises:
            RecordNotFoundError: If the ad does not exist
            AccessDeniedError: If the user is neither the author nor an admin
        """
        ad = await self.ad_repository.find_by_id(ad_id)
        if ad is None:
            raise RecordNotFoundError("Ad not found")

        ensure_owner_or_admin(ad.author_id, current_user)

        ad.title = request.title
        ad.price = request.price
        ad.description = request.description

        saved_ad = await self.ad_repository.save(ad)
        return to_ad_response(saved_ad)
