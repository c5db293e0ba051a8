from typing import Optional

from pydantic import BaseModel, Field

from ...domain.models.role import Role


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: int
    email: str
    first_name: str
    last_name: str
    phone: str
    role: Role
    image: Optional[str] = None


class UpdateUserRequest(BaseModel):
    """DTO for profile update request"""
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    phone: str


class UpdatePasswordRequest(BaseModel):
    """DTO for password change request"""
    current_password: str = Field(default="", max_length=256)
    new_password: str = Field(max_length=256)
