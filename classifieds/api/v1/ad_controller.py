# Standard library imports
import logging
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.responses import Response

# Local application imports
from ...application.dto.ad_dto import CreateOrUpdateAdRequest, AdResponse, AdsResponse, ExtendedAdResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.ad import (
    ListAdsUseCase,
    ListUserAdsUseCase,
    GetAdUseCase,
    CreateAdUseCase,
    UpdateAdUseCase,
    DeleteAdUseCase,
    UpdateAdImageUseCase,
    DownloadAdImageUseCase,
)
from ...domain.exceptions import RecordNotFoundError, AccessDeniedError
from ...di.container import get_container
from .dependencies import get_current_user
from .image_upload import read_image_upload, image_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ads"])


def _to_http_exception(exception: Exception) -> HTTPException:
    """Map a use case failure onto an HTTP error"""
    if isinstance(exception, RecordNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exception))
    if isinstance(exception, AccessDeniedError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exception))
    if isinstance(exception, ValueError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))
    logger.error(f"Image storage failure: {exception}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Could not process ad image"
    )


@router.get("", response_model=AdsResponse)
async def list_ads() -> AdsResponse:
    """
    List all ads (no authentication required)

    Returns:
        AdsResponse with count and ads
    """
    container = get_container()
    use_case = container.get(ListAdsUseCase)
    return await use_case.execute()


@router.post("", response_model=AdResponse, status_code=status.HTTP_201_CREATED)
async def create_ad(
    title: str = Form(..., min_length=1, max_length=200),
    price: int = Form(..., ge=0),
    description: Optional[str] = Form(None, max_length=2000),
    image: UploadFile = File(...),
    current_user: UserResponse = Depends(get_current_user),
) -> AdResponse:
    """
    Post a new ad with an image (multipart form)

    Returns:
        AdResponse for the created ad
    """
    content, filename = await read_image_upload(image)
    request = CreateOrUpdateAdRequest(title=title, price=price, description=description)

    container = get_container()
    use_case = container.get(CreateAdUseCase)

    try:
        return await use_case.execute(request, current_user.id, content, filename)
    except (ValueError, OSError) as exception:
        raise _to_http_exception(exception)


@router.get("/me", response_model=AdsResponse)
async def list_my_ads(current_user: UserResponse = Depends(get_current_user)) -> AdsResponse:
    """
    List the ads posted by the current user

    Args:
        current_user: Current authenticated user (from dependency)
    """
    container = get_container()
    use_case = container.get(ListUserAdsUseCase)
    return await use_case.execute(current_user.id)


@router.get("/{ad_id}", response_model=ExtendedAdResponse)
async def get_ad(
    ad_id: int,
    current_user: UserResponse = Depends(get_current_user),
) -> ExtendedAdResponse:
    """
    Get an ad together with its author's contact details

    Args:
        ad_id: ID of the ad
        current_user: Current authenticated user (from dependency)
    """
    container = get_container()
    use_case = container.get(GetAdUseCase)

    try:
        return await use_case.execute(ad_id)
    except ValueError as exception:
        raise _to_http_exception(exception)


@router.patch("/{ad_id}", response_model=AdResponse)
async def update_ad(
    ad_id: int,
    request: CreateOrUpdateAdRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> AdResponse:
    """
    Edit title, price and description of an ad (author or admin)
    """
    container = get_container()
    use_case = container.get(UpdateAdUseCase)

    try:
        return await use_case.execute(ad_id, request, current_user)
    except (ValueError, AccessDeniedError) as exception:
        raise _to_http_exception(exception)


@router.delete("/{ad_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ad(
    ad_id: int,
    current_user: UserResponse = Depends(get_current_user),
) -> Response:
    """
    Delete an ad with its comments and image (author or admin)
    """
    container = get_container()
    use_case = container.get(DeleteAdUseCase)

    try:
        await use_case.execute(ad_id, current_user)
    except (ValueError, AccessDeniedError) as exception:
        raise _to_http_exception(exception)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{ad_id}/image", response_model=AdResponse)
async def update_ad_image(
    ad_id: int,
    image: UploadFile = File(...),
    current_user: UserResponse = Depends(get_current_user),
) -> AdResponse:
    """
    Replace the image of an ad (author or admin)
    """
    content, filename = await read_image_upload(image)

    container = get_container()
    use_case = container.get(UpdateAdImageUseCase)

    try:
        return await use_case.execute(ad_id, content, filename, current_user)
    except (ValueError, AccessDeniedError, OSError) as exception:
        raise _to_http_exception(exception)


@router.get("/{ad_id}/image")
async def download_ad_image(ad_id: int) -> Response:
    """
    Download the image of an ad as raw bytes (no authentication required)
    """
    container = get_container()
    use_case = container.get(DownloadAdImageUseCase)

    try:
        content = await use_case.execute(ad_id)
    except FileNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Ad image file not found"
        )
    except (ValueError, OSError) as exception:
        raise _to_http_exception(exception)
    return image_response(content)
