from typing import List, Optional

from pydantic import BaseModel, Field


class CreateOrUpdateCommentRequest(BaseModel):
    """DTO for comment creation and update requests"""
    text: str = Field(min_length=1, max_length=1000)


class CommentResponse(BaseModel):
    """DTO for comment response"""
    pk: int
    author: int
    author_first_name: str
    author_image: Optional[str] = None
    created_at: int  # milliseconds since epoch
    text: str


class CommentsResponse(BaseModel):
    """DTO for the comments on one ad"""
    count: int
    results: List[CommentResponse]
