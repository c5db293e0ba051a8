# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import Response

# Local application imports
from ...application.dto.user_dto import UserResponse, UpdateUserRequest, UpdatePasswordRequest
from ...application.use_cases.user import (
    GetUserProfileUseCase,
    UpdatePasswordUseCase,
    UpdateUserUseCase,
    UpdateUserAvatarUseCase,
    DownloadAvatarUseCase,
)
from ...domain.exceptions import RecordNotFoundError
from ...di.container import get_container
from .dependencies import get_current_user
from .image_upload import read_image_upload, image_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.get("/me", response_model=UserResponse)
async def get_profile(current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
    """
    Get the profile of the current user

    Args:
        current_user: Current authenticated user (from dependency)

    Returns:
        UserResponse with profile fields
    """
    container = get_container()
    use_case = container.get(GetUserProfileUseCase)

    try:
        return await use_case.execute(current_user.email)
    except RecordNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )


@router.patch("/me", response_model=UserResponse)
async def update_profile(
    request: UpdateUserRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> UserResponse:
    """
    Update first name, last name and phone of the current user

    Args:
        request: New profile values
        current_user: Current authenticated user (from dependency)

    Returns:
        UserResponse with the updated profile
    """
    container = get_container()
    use_case = container.get(UpdateUserUseCase)

    try:
        return await use_case.execute(current_user.email, request)
    except RecordNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )


@router.post("/set_password")
async def set_password(
    request: UpdatePasswordRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> dict:
    """
    Change the password of the current user

    Returns:
        {"message": "Password updated"} on success; 400 when the new password is rejected
    """
    container = get_container()
    use_case = container.get(UpdatePasswordUseCase)

    try:
        updated = await use_case.execute(request, current_user.email)
    except RecordNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )

    if not updated:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Password must be at least 8 characters long, not blank and differ from the current one"
        )
    return {"message": "Password updated"}


@router.patch("/me/image", response_model=UserResponse)
async def update_avatar(
    image: UploadFile = File(...),
    current_user: UserResponse = Depends(get_current_user),
) -> UserResponse:
    """
    Replace the avatar of the current user

    Args:
        image: Uploaded image file
        current_user: Current authenticated user (from dependency)

    Returns:
        UserResponse with the new avatar URL
    """
    content, filename = await read_image_upload(image)

    container = get_container()
    use_case = container.get(UpdateUserAvatarUseCase)

    try:
        return await use_case.execute(current_user.email, content, filename)
    except RecordNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
    except OSError as exception:
        logger.error(f"Failed to store avatar for user {current_user.id}: {exception}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not store avatar image"
        )


@router.get("/{user_id}/image")
async def download_avatar(user_id: int) -> Response:
    """
    Download the avatar of a user as raw image bytes

    Args:
        user_id: ID of the user
    """
    container = get_container()
    use_case = container.get(DownloadAvatarUseCase)

    try:
        content = await use_case.execute(user_id)
    except RecordNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
    except FileNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Avatar file not found"
        )
    except OSError as exception:
        logger.error(f"Failed to read avatar for user {user_id}: {exception}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not read avatar image"
        )
    return image_response(content)
