# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import RecordNotFoundError
from ...dto.user_dto import UserResponse
from ...mappers import to_user_response


class GetUserProfileUseCase:
    """Use case for loading a user's profile by username"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, username: str) -> UserResponse:
        user = await self.user_repository.find_by_username(username)
        if user is None:
            raise RecordNotFoundError("User not found")
        return to_user_response(user)
