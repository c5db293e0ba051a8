# Standard library imports
from datetime import date
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.models.role import Role
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection
from .mongo_sequence import MongoSequence


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(
        self,
        user_collection: Optional[AsyncIOMotorCollection] = None,
        sequence: Optional[MongoSequence] = None,
    ) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
        self.sequence = sequence if sequence is not None else MongoSequence("users")
        self._username_index_ready = False

    async def ensure_username_index(self) -> None:
        """Create the unique index on username once per repository instance"""
        if self._username_index_ready:
            return
        await self.user_collection.create_index(UserFields.USERNAME, unique=True)
        self._username_index_ready = True

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by username

        Args:
            username: Username (e-mail) to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not username:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.USERNAME: username})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by username: {str(e)}")

    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: int(user_id)})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set
        """
        if not user:
            raise ValueError("User cannot be None")

        try:
            user_dict = self._user_to_dict(user)

            if user.id:
                # Update existing user
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: user.id},
                    {"$set": user_dict}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"User with ID {user.id} not found")
                object_id = user.id
            else:
                # Create new user; the unique index rejects concurrent duplicates
                await self.ensure_username_index()
                object_id = await self.sequence.next_value()
                await self.user_collection.insert_one({UserFields.MONGO_ID: object_id, **user_dict})

            saved_document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            if saved_document is None:
                raise RuntimeError(f"User {object_id} was saved but could not be retrieved")

            return self._document_to_user(saved_document)
        except DuplicateKeyError:
            raise ValueError("User with this username already exists")
        except ValueError:
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        register_date = document.get(UserFields.REGISTER_DATE)

        return User(
            id=int(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            first_name=document.get(UserFields.FIRST_NAME, ""),
            last_name=document.get(UserFields.LAST_NAME, ""),
            phone=document.get(UserFields.PHONE, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            role=Role(document.get(UserFields.ROLE, Role.USER.value)),
            avatar_path=document.get(UserFields.AVATAR_PATH),
            register_date=date.fromisoformat(register_date) if register_date else None,
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document (without _id)

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        if not user:
            raise ValueError("User cannot be None")

        # BSON has no date type, store ISO string
        return {
            UserFields.USERNAME: user.username,
            UserFields.FIRST_NAME: user.first_name,
            UserFields.LAST_NAME: user.last_name,
            UserFields.PHONE: user.phone,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.ROLE: user.role.value,
            UserFields.AVATAR_PATH: user.avatar_path,
            UserFields.REGISTER_DATE: user.register_date.isoformat() if user.register_date else None,
        }
