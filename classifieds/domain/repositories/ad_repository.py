from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.ad import Ad


class AdRepository(ABC):
    """Repository interface - defines contract for ad data access"""

    @abstractmethod
    async def find_by_id(self, ad_id: int) -> Optional[Ad]:
        """Find ad by ID"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Ad]:
        """Find all ads"""
        pass

    @abstractmethod
    async def find_by_author(self, author_id: int) -> List[Ad]:
        """Find all ads posted by a user"""
        pass

    @abstractmethod
    async def save(self, ad: Ad) -> Ad:
        """Save ad (create or update)"""
        pass

    @abstractmethod
    async def delete(self, ad_id: int) -> bool:
        """Delete ad by ID, returns True if a record was removed"""
        pass
