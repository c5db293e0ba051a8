"""Local Image Storage

Stores user avatars and ad images as files under the configured
image storage directory, organized by category:

    <image_storage_dir>/<category>/<owner_id>-<random hex><ext>
"""

# Standard library imports
import logging
import uuid
from pathlib import Path
from typing import Optional

# Local application imports
from ...core.config import get_settings
from ...domain.storage.image_storage import ImageStorage

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".jpg"


class LocalImageStorage(ImageStorage):
    """Filesystem implementation of ImageStorage"""

    def __init__(self, base_dir: Optional[str] = None) -> None:
        self.base_dir = Path(base_dir if base_dir is not None else get_settings().image_storage_dir)

    def get_storage_path(self, category: str) -> Path:
        """
        Get the storage directory for a category, creating it if needed.

        Args:
            category: Subfolder name (e.g. "avatars", "ads")

        Returns:
            Path object for the storage directory
        """
        storage_path = self.base_dir / category
        storage_path.mkdir(parents=True, exist_ok=True)
        return storage_path

    def save_image(self, content: bytes, filename: str, owner_id: int, category: str) -> str:
        """
        Write image bytes to a new file.

        Args:
            content: Raw image bytes
            filename: Original file name, only its extension is kept
            owner_id: ID of the owning user or ad
            category: Subfolder name

        Returns:
            Path of the stored file as a string
        """
        ext = Path(filename or "").suffix.lower() or DEFAULT_EXTENSION
        image_path = self.get_storage_path(category) / f"{owner_id}-{uuid.uuid4().hex}{ext}"

        with open(image_path, "wb") as f:
            f.write(content)

        logger.info(f"Saved image: {image_path}")
        return str(image_path)

    def delete_image(self, path: Optional[str]) -> bool:
        """
        Remove a stored image if it exists.

        Failures are logged and reported as False, never raised.
        """
        if not path:
            logger.info("No previous image to delete")
            return False

        image_path = Path(path)
        try:
            if not image_path.exists():
                logger.info(f"Image already absent: {image_path}")
                return False
            image_path.unlink()
            logger.info(f"Deleted image: {image_path}")
            return True
        except OSError as e:
            logger.warning(f"Failed to delete image {image_path}: {e}")
            return False

    def read_image(self, path: str) -> bytes:
        """Read raw bytes of a stored image; OSError propagates to the caller."""
        with open(Path(path), "rb") as f:
            return f.read()
