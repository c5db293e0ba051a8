# Local application imports
from ...domain.models.role import Role
from ...domain.exceptions import AccessDeniedError
from ..dto.user_dto import UserResponse


def ensure_owner_or_admin(owner_id: int, current_user: UserResponse) -> None:
    """Raise AccessDeniedError unless the current user owns the record or is an admin"""
    if current_user.role == Role.ADMIN:
        return
    if current_user.id != owner_id:
        raise AccessDeniedError("Insufficient permissions")
