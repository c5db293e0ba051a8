# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.comment_repository import CommentRepository
from ...domain.models.comment import Comment
from ...domain.constants import CommentFields
from .mongo_connection import get_comment_collection
from .mongo_sequence import MongoSequence


class MongoCommentRepository(CommentRepository):
    """MongoDB implementation of CommentRepository"""

    def __init__(
        self,
        comment_collection: Optional[AsyncIOMotorCollection] = None,
        sequence: Optional[MongoSequence] = None,
    ) -> None:
        self.comment_collection = comment_collection if comment_collection is not None else get_comment_collection()
        self.sequence = sequence if sequence is not None else MongoSequence("comments")

    async def find_by_id(self, comment_id: int) -> Optional[Comment]:
        if not comment_id:
            return None

        try:
            document = await self.comment_collection.find_one({CommentFields.MONGO_ID: int(comment_id)})
            if document is None:
                return None
            return self._document_to_comment(document)
        except Exception as e:
            raise RuntimeError(f"Error finding comment by ID: {str(e)}")

    async def find_by_ad(self, ad_id: int) -> List[Comment]:
        """
        Find all comments on an ad, ordered by creation time

        Args:
            ad_id: The ad ID

        Returns:
            List of Comment domain models
        """
        if not ad_id:
            return []

        try:
            cursor = self.comment_collection.find({CommentFields.AD_ID: int(ad_id)}).sort(CommentFields.CREATED_AT, 1)
            comments = []
            async for document in cursor:
                comments.append(self._document_to_comment(document))
            return comments
        except Exception as e:
            raise RuntimeError(f"Error listing comments for ad: {str(e)}")

    async def save(self, comment: Comment) -> Comment:
        """
        Save comment (create new or update existing)

        Args:
            comment: Comment domain model to save

        Returns:
            Saved Comment domain model with ID set
        """
        if not comment:
            raise ValueError("Comment cannot be None")

        try:
            comment_dict = self._comment_to_dict(comment)

            if comment.id:
                update_result = await self.comment_collection.update_one(
                    {CommentFields.MONGO_ID: comment.id},
                    {"$set": comment_dict}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"Comment with ID {comment.id} not found")
                object_id = comment.id
            else:
                object_id = await self.sequence.next_value()
                await self.comment_collection.insert_one({CommentFields.MONGO_ID: object_id, **comment_dict})

            saved_document = await self.comment_collection.find_one({CommentFields.MONGO_ID: object_id})
            if saved_document is None:
                raise RuntimeError(f"Comment {object_id} was saved but could not be retrieved")

            return self._document_to_comment(saved_document)
        except ValueError:
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving comment: {str(e)}")

    async def delete(self, comment_id: int) -> bool:
        try:
            result = await self.comment_collection.delete_one({CommentFields.MONGO_ID: int(comment_id)})
            return result.deleted_count > 0
        except Exception as e:
            raise RuntimeError(f"Error deleting comment: {str(e)}")

    async def delete_by_ad(self, ad_id: int) -> int:
        try:
            result = await self.comment_collection.delete_many({CommentFields.AD_ID: int(ad_id)})
            return result.deleted_count
        except Exception as e:
            raise RuntimeError(f"Error deleting comments for ad: {str(e)}")

    def _document_to_comment(self, document: Dict[str, Any]) -> Comment:
        if not document or CommentFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Comment(
            id=int(document[CommentFields.MONGO_ID]),
            ad_id=int(document.get(CommentFields.AD_ID, 0)),
            author_id=int(document.get(CommentFields.AUTHOR_ID, 0)),
            text=document.get(CommentFields.TEXT, ""),
            created_at=int(document.get(CommentFields.CREATED_AT, 0)),
        )

    def _comment_to_dict(self, comment: Comment) -> Dict[str, Any]:
        if not comment:
            raise ValueError("Comment cannot be None")

        return {
            CommentFields.AD_ID: comment.ad_id,
            CommentFields.AUTHOR_ID: comment.author_id,
            CommentFields.TEXT: comment.text,
            CommentFields.CREATED_AT: comment.created_at,
        }
