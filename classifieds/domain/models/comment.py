# Standard library imports
from dataclasses import dataclass
from typing import Optional


@dataclass
class Comment:
    """
    Pure domain model for Comment entity.

    created_at is milliseconds since the Unix epoch.
    """
    id: Optional[int]
    ad_id: int
    author_id: int
    text: str
    created_at: int

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.ad_id:
            raise ValueError("Ad ID is required")
        if not self.author_id:
            raise ValueError("Author user ID is required")
        if not self.text or not self.text.strip():
            raise ValueError("Comment text is required")
