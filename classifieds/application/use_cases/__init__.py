from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .user import (
    GetUserProfileUseCase,
    UpdatePasswordUseCase,
    UpdateUserUseCase,
    UpdateUserAvatarUseCase,
    DownloadAvatarUseCase,
)
from .ad import (
    ListAdsUseCase,
    ListUserAdsUseCase,
    GetAdUseCase,
    CreateAdUseCase,
    UpdateAdUseCase,
    DeleteAdUseCase,
    UpdateAdImageUseCase,
    DownloadAdImageUseCase,
)
from .comment import (
    ListCommentsUseCase,
    AddCommentUseCase,
    UpdateCommentUseCase,
    DeleteCommentUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "GetUserProfileUseCase",
    "UpdatePasswordUseCase",
    "UpdateUserUseCase",
    "UpdateUserAvatarUseCase",
    "DownloadAvatarUseCase",
    "ListAdsUseCase",
    "ListUserAdsUseCase",
    "GetAdUseCase",
    "CreateAdUseCase",
    "UpdateAdUseCase",
    "DeleteAdUseCase",
    "UpdateAdImageUseCase",
    "DownloadAdImageUseCase",
    "ListCommentsUseCase",
    "AddCommentUseCase",
    "UpdateCommentUseCase",
    "DeleteCommentUseCase",
]
