from .role import Role
from .user import User
from .ad import Ad
from .comment import Comment

__all__ = ["Role", "User", "Ad", "Comment"]
