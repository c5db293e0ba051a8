# Standard library imports
from dataclasses import dataclass
from typing import Optional


@dataclass
class Ad:
    """
    Pure domain model for Ad entity - no external dependencies.

    An ad always belongs to an existing user (author_id).
    """
    id: Optional[int]
    author_id: int
    title: str
    price: int
    description: Optional[str] = None
    image_path: Optional[str] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.author_id:
            raise ValueError("Author user ID is required")
        if not self.title or len(self.title.strip()) < 1:
            raise ValueError("Ad title is required")
        if self.price is None or self.price < 0:
            raise ValueError("Ad price must be a non-negative integer")
