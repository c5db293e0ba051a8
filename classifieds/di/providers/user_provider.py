from typing import TYPE_CHECKING
from ...core.security import PasswordEncoder
from ...domain.repositories.user_repository import UserRepository
from ...domain.storage.image_storage import ImageStorage
from ...application.use_cases.user import (
    GetUserProfileUseCase,
    UpdatePasswordUseCase,
    UpdateUserUseCase,
    UpdateUserAvatarUseCase,
    DownloadAvatarUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User profile use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetUserProfileUseCase,
            lambda: GetUserProfileUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            UpdatePasswordUseCase,
            lambda: UpdatePasswordUseCase(
                user_repository=container.get(UserRepository),
                password_encoder=container.get(PasswordEncoder),
            )
        )

        container.register_factory(
            UpdateUserUseCase,
            lambda: UpdateUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            UpdateUserAvatarUseCase,
            lambda: UpdateUserAvatarUseCase(
                user_repository=container.get(UserRepository),
                image_storage=container.get(ImageStorage),
            )
        )

        container.register_factory(
            DownloadAvatarUseCase,
            lambda: DownloadAvatarUseCase(
                user_repository=container.get(UserRepository),
                image_storage=container.get(ImageStorage),
            )
        )
