# Standard library imports
import logging
from datetime import date

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.validators import check_password, check_phone_format, check_username
from ....core.security import PasswordEncoder
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse
from ...mappers import to_user_response

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository, password_encoder: PasswordEncoder) -> None:
        self.user_repository = user_repository
        self.password_encoder = password_encoder

    async def check_user(self, username: str) -> bool:
        """Return True if a user with this username is already stored"""
        return await self.user_repository.find_by_username(username) is not None

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        Password, username and phone are validated, but a failed check is
        only logged; the account is created regardless.

        Args:
            request: Registration request with user details

        Returns:
            UserResponse with created user information

        Raises:
            ValueError: If user with this username already exists
        """
        if await self.check_user(request.username):
            raise ValueError("User with this username already exists")

        encoded_password = self.password_encoder.encode(request.password)

        checks = {
            "password": check_password(request.password),
            "username": check_username(request.username),
            "phone": check_phone_format(request.phone),
        }
        failed = [field for field, passed in checks.items() if not passed]
        if failed:
            logger.warning(
                f"Registration data for {request.username} failed validation: {', '.join(failed)}"
            )

        new_user = User(
            id=None,  # Will be set by repository
            username=request.username,
            first_name=request.first_name,
            last_name=request.last_name,
            phone=request.phone,
            hashed_password=encoded_password,
            role=request.role,
            register_date=date.today(),
        )

        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.username} with ID {saved_user.id}")

        return to_user_response(saved_user)
