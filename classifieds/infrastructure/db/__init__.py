from .mongo_connection import (
    get_database,
    close_database,
    get_user_collection,
    get_ad_collection,
    get_comment_collection,
    get_counter_collection,
)
from .mongo_sequence import MongoSequence
from .mongo_user_repository import MongoUserRepository
from .mongo_ad_repository import MongoAdRepository
from .mongo_comment_repository import MongoCommentRepository

__all__ = [
    "get_database",
    "close_database",
    "get_user_collection",
    "get_ad_collection",
    "get_comment_collection",
    "get_counter_collection",
    "MongoSequence",
    "MongoUserRepository",
    "MongoAdRepository",
    "MongoCommentRepository",
]
