from enum import Enum


class Role(str, Enum):
    """Closed set of user roles"""
    USER = "USER"
    ADMIN = "ADMIN"
