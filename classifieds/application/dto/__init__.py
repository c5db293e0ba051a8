from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse, UpdateUserRequest, UpdatePasswordRequest
from .ad_dto import CreateOrUpdateAdRequest, AdResponse, AdsResponse, ExtendedAdResponse
from .comment_dto import CreateOrUpdateCommentRequest, CommentResponse, CommentsResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "UpdateUserRequest",
    "UpdatePasswordRequest",
    "CreateOrUpdateAdRequest",
    "AdResponse",
    "AdsResponse",
    "ExtendedAdResponse",
    "CreateOrUpdateCommentRequest",
    "CommentResponse",
    "CommentsResponse",
]
