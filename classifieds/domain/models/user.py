# Standard library imports
from dataclasses import dataclass
from datetime import date
from typing import Optional

# Local application imports
from .role import Role


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[int]
    username: str  # e-mail, unique
    first_name: str
    last_name: str
    phone: str
    hashed_password: str
    role: Role = Role.USER
    avatar_path: Optional[str] = None
    register_date: Optional[date] = None

    def __post_init__(self):
        """Business validations"""
        if not self.username or not self.username.strip():
            raise ValueError("Username is required")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
        if not isinstance(self.role, Role):
            self.role = Role(self.role)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
