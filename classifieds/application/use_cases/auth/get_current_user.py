# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import AuthenticationError
from ....core.security import decode_jwt_token
from ...dto.user_dto import UserResponse
from ...mappers import to_user_response


class GetCurrentUserUseCase:
    """Use case for resolving the user behind a bearer token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, token: str) -> UserResponse:
        """
        Resolve the user whose numeric ID is the token subject

        Args:
            token: JWT access token

        Returns:
            UserResponse of the authenticated user

        Raises:
            AuthenticationError: If the token is invalid or its user no longer exists
        """
        try:
            payload = decode_jwt_token(token)
        except ValueError as exception:
            raise AuthenticationError(f"Invalid or expired token: {str(exception)}")

        subject: Optional[str] = payload.get("sub")
        if not subject:
            raise AuthenticationError("Invalid authentication payload: missing user ID")

        try:
            user_id = int(subject)
        except (TypeError, ValueError):
            raise AuthenticationError("Invalid authentication payload: malformed user ID")

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise AuthenticationError("User not found")

        return to_user_response(user)
