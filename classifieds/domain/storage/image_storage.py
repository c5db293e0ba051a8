from abc import ABC, abstractmethod
from typing import Optional


class ImageStorage(ABC):
    """Storage interface - defines contract for image file handling"""

    @abstractmethod
    def save_image(self, content: bytes, filename: str, owner_id: int, category: str) -> str:
        """
        Store image bytes for an owner (user or ad)

        Returns:
            Path of the stored file

        Raises:
            OSError: If the file cannot be written
        """
        pass

    @abstractmethod
    def delete_image(self, path: Optional[str]) -> bool:
        """Best-effort removal of a stored image, returns True if a file was removed"""
        pass

    @abstractmethod
    def read_image(self, path: str) -> bytes:
        """
        Read raw bytes of a stored image

        Raises:
            OSError: If the file is missing or cannot be read
        """
        pass
