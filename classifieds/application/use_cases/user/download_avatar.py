# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.storage.image_storage import ImageStorage
from ....domain.exceptions import RecordNotFoundError

logger = logging.getLogger(__name__)


class DownloadAvatarUseCase:
    """Use case for reading a user's avatar bytes"""

    def __init__(self, user_repository: UserRepository, image_storage: ImageStorage) -> None:
        self.user_repository = user_repository
        self.image_storage = image_storage

    async def execute(self, user_id: int) -> bytes:
        """
        Raises:
            RecordNotFoundError: If the user does not exist or has no avatar
            OSError: If the stored file cannot be read
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise RecordNotFoundError("User not found")
        if not user.avatar_path:
            raise RecordNotFoundError("User has no avatar")

        image = self.image_storage.read_image(user.avatar_path)
        logger.info(f"Download avatar for user {user.username}")
        return image
