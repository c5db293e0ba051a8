# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.ad_repository import AdRepository
from ...domain.models.ad import Ad
from ...domain.constants import AdFields
from .mongo_connection import get_ad_collection
from .mongo_sequence import MongoSequence


class MongoAdRepository(AdRepository):
    """MongoDB implementation of AdRepository"""

    def __init__(
        self,
        ad_collection: Optional[AsyncIOMotorCollection] = None,
        sequence: Optional[MongoSequence] = None,
    ) -> None:
        self.ad_collection = ad_collection if ad_collection is not None else get_ad_collection()
        self.sequence = sequence if sequence is not None else MongoSequence("ads")

    async def find_by_id(self, ad_id: int) -> Optional[Ad]:
        """
        Find ad by ID

        Args:
            ad_id: The ad ID to find

        Returns:
            Ad domain model if found, None otherwise
        """
        if not ad_id:
            return None

        try:
            document = await self.ad_collection.find_one({AdFields.MONGO_ID: int(ad_id)})
            if document is None:
                return None
            return self._document_to_ad(document)
        except Exception as e:
            raise RuntimeError(f"Error finding ad by ID: {str(e)}")

    async def find_all(self) -> List[Ad]:
        """
        Find all ads, newest first

        Returns:
            List of Ad domain models
        """
        try:
            cursor = self.ad_collection.find({}).sort(AdFields.MONGO_ID, -1)
            ads = []
            async for document in cursor:
                ads.append(self._document_to_ad(document))
            return ads
        except Exception as e:
            raise RuntimeError(f"Error listing ads: {str(e)}")

    async def find_by_author(self, author_id: int) -> List[Ad]:
        """
        Find all ads posted by a user

        Args:
            author_id: The author user ID

        Returns:
            List of Ad domain models
        """
        if not author_id:
            return []

        try:
            cursor = self.ad_collection.find({AdFields.AUTHOR_ID: int(author_id)}).sort(AdFields.MONGO_ID, -1)
            ads = []
            async for document in cursor:
                ads.append(self._document_to_ad(document))
            return ads
        except Exception as e:
            raise RuntimeError(f"Error listing ads for author: {str(e)}")

    async def save(self, ad: Ad) -> Ad:
        """
        Save ad (create new or update existing)

        Args:
            ad: Ad domain model to save

        Returns:
            Saved Ad domain model with ID set
        """
        if not ad:
            raise ValueError("Ad cannot be None")

        try:
            ad_dict = self._ad_to_dict(ad)

            if ad.id:
                update_result = await self.ad_collection.update_one(
                    {AdFields.MONGO_ID: ad.id},
                    {"$set": ad_dict}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"Ad with ID {ad.id} not found")
                object_id = ad.id
            else:
                object_id = await self.sequence.next_value()
                await self.ad_collection.insert_one({AdFields.MONGO_ID: object_id, **ad_dict})

            saved_document = await self.ad_collection.find_one({AdFields.MONGO_ID: object_id})
            if saved_document is None:
                raise RuntimeError(f"Ad {object_id} was saved but could not be retrieved")

            return self._document_to_ad(saved_document)
        except ValueError:
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving ad: {str(e)}")

    async def delete(self, ad_id: int) -> bool:
        """Delete ad by ID"""
        try:
            result = await self.ad_collection.delete_one({AdFields.MONGO_ID: int(ad_id)})
            return result.deleted_count > 0
        except Exception as e:
            raise RuntimeError(f"Error deleting ad: {str(e)}")

    def _document_to_ad(self, document: Dict[str, Any]) -> Ad:
        """
        Convert MongoDB document to Ad domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Ad domain model
        """
        if not document or AdFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Ad(
            id=int(document[AdFields.MONGO_ID]),
            author_id=int(document.get(AdFields.AUTHOR_ID, 0)),
            title=document.get(AdFields.TITLE, ""),
            price=int(document.get(AdFields.PRICE, 0)),
            description=document.get(AdFields.DESCRIPTION),
            image_path=document.get(AdFields.IMAGE_PATH),
        )

    def _ad_to_dict(self, ad: Ad) -> Dict[str, Any]:
        """Convert Ad domain model to MongoDB document (without _id)"""
        if not ad:
            raise ValueError("Ad cannot be None")

        return {
            AdFields.AUTHOR_ID: ad.author_id,
            AdFields.TITLE: ad.title,
            AdFields.PRICE: ad.price,
            AdFields.DESCRIPTION: ad.description,
            AdFields.IMAGE_PATH: ad.image_path,
        }
