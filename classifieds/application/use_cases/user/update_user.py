# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import RecordNotFoundError, InvalidArgumentError
from ....domain.validators import check_phone_format
from ...dto.user_dto import UpdateUserRequest, UserResponse
from ...mappers import apply_user_update, to_user_response

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for updating a user's profile fields"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, username: str, request: UpdateUserRequest) -> UserResponse:
        """
        Update first name, last name and phone of a user

        Args:
            username: Username (e-mail) of the user
            request: New profile values

        Returns:
            UserResponse with the updated profile

        Raises:
            RecordNotFoundError: If the user does not exist
            InvalidArgumentError: If the phone is not in +7(XXX)XXX-XX-XX format
        """
        user = await self.user_repository.find_by_username(username)
        if user is None:
            raise RecordNotFoundError("User not found")

        if not check_phone_format(request.phone):
            logger.info(f"Profile update for {username} rejected: invalid phone format")
            raise InvalidArgumentError("Phone number must be in the format +7(XXX)XXX-XX-XX")

        saved_user = await self.user_repository.save(apply_user_update(request, user))
        return to_user_response(saved_user)
