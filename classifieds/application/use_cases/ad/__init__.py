from .list_ads import ListAdsUseCase, ListUserAdsUseCase
from .get_ad import GetAdUseCase
from .create_ad import CreateAdUseCase
from .update_ad import UpdateAdUseCase
from .delete_ad import DeleteAdUseCase
from .ad_image import UpdateAdImageUseCase, DownloadAdImageUseCase

__all__ = [
    "ListAdsUseCase",
    "ListUserAdsUseCase",
    "GetAdUseCase",
    "CreateAdUseCase",
    "UpdateAdUseCase",
    "DeleteAdUseCase",
    "UpdateAdImageUseCase",
    "DownloadAdImageUseCase",
]
