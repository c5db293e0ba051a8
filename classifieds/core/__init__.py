from .config import Settings, get_settings
from .security import (
    PasswordEncoder,
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
)

__all__ = [
    "Settings",
    "get_settings",
    "PasswordEncoder",
    "hash_password",
    "verify_password",
    "create_jwt_token",
    "decode_jwt_token",
]
