from .image_storage import ImageStorage

__all__ = ["ImageStorage"]
