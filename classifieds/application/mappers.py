"""
Conversions between domain entities and response DTOs.

Image fields in responses are download URLs served by the API, never the
storage path on disk.
"""
# Standard library imports
from typing import List, Optional

# Local application imports
from ..domain.models.user import User
from ..domain.models.ad import Ad
from ..domain.models.comment import Comment
from .dto.user_dto import UserResponse, UpdateUserRequest
from .dto.ad_dto import AdResponse, AdsResponse, ExtendedAdResponse
from .dto.comment_dto import CommentResponse


API_PREFIX = "/api/v1"


def avatar_url(user: User) -> Optional[str]:
    if not user.avatar_path or user.id is None:
        return None
    return f"{API_PREFIX}/users/{user.id}/image"


def ad_image_url(ad: Ad) -> Optional[str]:
    if not ad.image_path or ad.id is None:
        return None
    return f"{API_PREFIX}/ads/{ad.id}/image"


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id or 0,
        email=user.username,
        first_name=user.first_name,
        last_name=user.last_name,
        phone=user.phone,
        role=user.role,
        image=avatar_url(user),
    )


def apply_user_update(request: UpdateUserRequest, user: User) -> User:
    """Merge profile fields from the request onto the stored user"""
    user.first_name = request.first_name
    user.last_name = request.last_name
    user.phone = request.phone
    return user


def to_ad_response(ad: Ad) -> AdResponse:
    return AdResponse(
        pk=ad.id or 0,
        author=ad.author_id,
        title=ad.title,
        price=ad.price,
        image=ad_image_url(ad),
    )


def to_ads_response(ads: List[Ad]) -> AdsResponse:
    results = [to_ad_response(ad) for ad in ads]
    return AdsResponse(count=len(results), results=results)


def to_extended_ad_response(ad: Ad, author: User) -> ExtendedAdResponse:
    return ExtendedAdResponse(
        pk=ad.id or 0,
        title=ad.title,
        price=ad.price,
        description=ad.description,
        image=ad_image_url(ad),
        author_first_name=author.first_name,
        author_last_name=author.last_name,
        email=author.username,
        phone=author.phone,
    )


def to_comment_response(comment: Comment, author: Optional[User]) -> CommentResponse:
    return CommentResponse(
        pk=comment.id or 0,
        author=comment.author_id,
        author_first_name=author.first_name if author else "",
        author_image=avatar_url(author) if author else None,
        created_at=comment.created_at,
        text=comment.text,
    )
