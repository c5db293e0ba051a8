from typing import TYPE_CHECKING
from ...domain.repositories.ad_repository import AdRepository
from ...domain.repositories.comment_repository import CommentRepository
from ...domain.repositories.user_repository import UserRepository
from ...domain.storage.image_storage import ImageStorage
from ...application.use_cases.ad import (
    ListAdsUseCase,
    ListUserAdsUseCase,
    GetAdUseCase,
    CreateAdUseCase,
    UpdateAdUseCase,
    DeleteAdUseCase,
    UpdateAdImageUseCase,
    DownloadAdImageUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AdProvider:
    """Ad use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all ad use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            ListAdsUseCase,
            lambda: ListAdsUseCase(ad_repository=container.get(AdRepository))
        )

        container.register_factory(
            ListUserAdsUseCase,
            lambda: ListUserAdsUseCase(ad_repository=container.get(AdRepository))
        )

        container.register_factory(
            GetAdUseCase,
            lambda: GetAdUseCase(
                ad_repository=container.get(AdRepository),
                user_repository=container.get(UserRepository),
            )
        )

        container.register_factory(
            CreateAdUseCase,
            lambda: CreateAdUseCase(
                ad_repository=container.get(AdRepository),
                image_storage=container.get(ImageStorage),
            )
        )

        container.register_factory(
            UpdateAdUseCase,
            lambda: UpdateAdUseCase(ad_repository=container.get(AdRepository))
        )

        container.register_factory(
            DeleteAdUseCase,
            lambda: DeleteAdUseCase(
                ad_repository=container.get(AdRepository),
                comment_repository=container.get(CommentRepository),
                image_storage=container.get(ImageStorage),
            )
        )

        container.register_factory(
            UpdateAdImageUseCase,
            lambda: UpdateAdImageUseCase(
                ad_repository=container.get(AdRepository),
                image_storage=container.get(ImageStorage),
            )
        )

        container.register_factory(
            DownloadAdImageUseCase,
            lambda: DownloadAdImageUseCase(
                ad_repository=container.get(AdRepository),
                image_storage=container.get(ImageStorage),
            )
        )
