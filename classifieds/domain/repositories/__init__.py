from .user_repository import UserRepository
from .ad_repository import AdRepository
from .comment_repository import CommentRepository

__all__ = ["UserRepository", "AdRepository", "CommentRepository"]
