from typing import List, Optional

from pydantic import BaseModel, Field


class CreateOrUpdateAdRequest(BaseModel):
    """DTO for ad creation and update requests"""
    title: str = Field(min_length=1, max_length=200)
    price: int = Field(ge=0)
    description: Optional[str] = Field(default=None, max_length=2000)


class AdResponse(BaseModel):
    """DTO for ad list entries"""
    pk: int
    author: int
    title: str
    price: int
    image: Optional[str] = None


class AdsResponse(BaseModel):
    """DTO for a list of ads"""
    count: int
    results: List[AdResponse]


class ExtendedAdResponse(BaseModel):
    """DTO for a single ad with its author's contact details"""
    pk: int
    title: str
    price: int
    description: Optional[str] = None
    image: Optional[str] = None
    author_first_name: str
    author_last_name: str
    email: str
    phone: str
