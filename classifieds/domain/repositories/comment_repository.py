from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.comment import Comment


class CommentRepository(ABC):
    """Repository interface - defines contract for comment data access"""

    @abstractmethod
    async def find_by_id(self, comment_id: int) -> Optional[Comment]:
        """Find comment by ID"""
        pass

    @abstractmethod
    async def find_by_ad(self, ad_id: int) -> List[Comment]:
        """Find all comments on an ad, oldest first"""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save comment (create or update)"""
        pass

    @abstractmethod
    async def delete(self, comment_id: int) -> bool:
        """Delete comment by ID"""
        pass

    @abstractmethod
    async def delete_by_ad(self, ad_id: int) -> int:
        """Delete all comments on an ad, returns the number removed"""
        pass
