from typing import TYPE_CHECKING
from ...core.security import PasswordEncoder
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.ad_repository import AdRepository
from ...domain.repositories.comment_repository import CommentRepository
from ...domain.storage.image_storage import ImageStorage
from ...infrastructure.db.mongo_sequence import MongoSequence
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_ad_repository import MongoAdRepository
from ...infrastructure.db.mongo_comment_repository import MongoCommentRepository
from ...infrastructure.storage.local_image_storage import LocalImageStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register repository, storage and encoder implementations.
        Gets collections from database provider and creates repository instances.
        """
        counter_collection = container.get("counter_collection")

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            MongoUserRepository(
                user_collection=container.get("user_collection"),
                sequence=MongoSequence("users", counter_collection),
            )
        )

        container.register_singleton(
            AdRepository,
            MongoAdRepository(
                ad_collection=container.get("ad_collection"),
                sequence=MongoSequence("ads", counter_collection),
            )
        )

        container.register_singleton(
            CommentRepository,
            MongoCommentRepository(
                comment_collection=container.get("comment_collection"),
                sequence=MongoSequence("comments", counter_collection),
            )
        )

        container.register_singleton(ImageStorage, LocalImageStorage())
        container.register_singleton(PasswordEncoder, PasswordEncoder())
