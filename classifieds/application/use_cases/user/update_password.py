# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import RecordNotFoundError
from ....domain.validators import check_password
from ....core.security import PasswordEncoder
from ...dto.user_dto import UpdatePasswordRequest

logger = logging.getLogger(__name__)


class UpdatePasswordUseCase:
    """Use case for changing the password of a user"""

    def __init__(self, user_repository: UserRepository, password_encoder: PasswordEncoder) -> None:
        self.user_repository = user_repository
        self.password_encoder = password_encoder

    async def execute(self, request: UpdatePasswordRequest, username: str) -> bool:
        """
        Validate and store a new password

        The new password is compared with the encoded form of the stored
        password value, so an unchanged password is not detected. Kept as is
        until the intended check (against current_password) is agreed on.

        Args:
            request: Password change request
            username: Username (e-mail) of the user

        Returns:
            True if the new password was encoded and saved, False if it was rejected

        Raises:
            RecordNotFoundError: If the user does not exist
        """
        user = await self.user_repository.find_by_username(username)
        if user is None:
            raise RecordNotFoundError("User not found")

        current_password = self.password_encoder.encode(user.hashed_password)
        new_password = request.new_password

        if new_password != current_password and check_password(new_password):
            user.hashed_password = self.password_encoder.encode(new_password)
            await self.user_repository.save(user)
            logger.info(f"Password updated for user {username}")
            return True

        logger.info(
            "New password rejected: it must be at least 8 characters long, "
            "not consist of whitespace only and differ from the current password"
        )
        return False
