"""Constants for domain model field names"""

from .user_fields import UserFields
from .ad_fields import AdFields
from .comment_fields import CommentFields

__all__ = [
    "UserFields",
    "AdFields",
    "CommentFields",
]
