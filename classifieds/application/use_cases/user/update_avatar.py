# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.storage.image_storage import ImageStorage
from ....domain.exceptions import RecordNotFoundError
from ....domain.constants.media_constants import AVATAR_SUBDIR
from ...dto.user_dto import UserResponse
from ...mappers import to_user_response

logger = logging.getLogger(__name__)


class UpdateUserAvatarUseCase:
    """Use case for replacing a user's avatar image"""

    def __init__(self, user_repository: UserRepository, image_storage: ImageStorage) -> None:
        self.user_repository = user_repository
        self.image_storage = image_storage

    async def execute(self, username: str, content: bytes, filename: str) -> UserResponse:
        """
        Delete the old avatar file, store the new one and update the user

        The two file steps and the database write are not coordinated: if
        saving the new image fails, the old avatar is already gone.

        Args:
            username: Username (e-mail) of the authenticated user
            content: Raw image bytes
            filename: Original file name (used for the extension)

        Returns:
            UserResponse with the new avatar URL

        Raises:
            RecordNotFoundError: If the user does not exist
            OSError: If the new image cannot be written
        """
        user = await self.user_repository.find_by_username(username)
        if user is None:
            raise RecordNotFoundError("User not found")

        self.image_storage.delete_image(user.avatar_path)
        user.avatar_path = self.image_storage.save_image(content, filename, user.id, AVATAR_SUBDIR)

        saved_user = await self.user_repository.save(user)
        logger.info(f"Avatar updated for user {username}: {saved_user.avatar_path}")
        return to_user_response(saved_user)
