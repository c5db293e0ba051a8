from .get_user_profile import GetUserProfileUseCase
from .update_password import UpdatePasswordUseCase
from .update_user import UpdateUserUseCase
from .update_avatar import UpdateUserAvatarUseCase
from .download_avatar import DownloadAvatarUseCase

__all__ = [
    "GetUserProfileUseCase",
    "UpdatePasswordUseCase",
    "UpdateUserUseCase",
    "UpdateUserAvatarUseCase",
    "DownloadAvatarUseCase",
]
