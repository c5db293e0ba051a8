# External package imports
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

# Local application imports
from ...application.dto.comment_dto import CreateOrUpdateCommentRequest, CommentResponse, CommentsResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.comment import (
    ListCommentsUseCase,
    AddCommentUseCase,
    UpdateCommentUseCase,
    DeleteCommentUseCase,
)
from ...domain.exceptions import RecordNotFoundError, AccessDeniedError
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["comments"])


@router.get("/{ad_id}/comments", response_model=CommentsResponse)
async def list_comments(
    ad_id: int,
    current_user: UserResponse = Depends(get_current_user),
) -> CommentsResponse:
    """
    List the comments on an ad

    Args:
        ad_id: ID of the ad
        current_user: Current authenticated user (from dependency)
    """
    container = get_container()
    use_case = container.get(ListCommentsUseCase)

    try:
        return await use_case.execute(ad_id)
    except RecordNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )


@router.post("/{ad_id}/comments", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def add_comment(
    ad_id: int,
    request: CreateOrUpdateCommentRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> CommentResponse:
    """
    Comment on an ad as the current user
    """
    container = get_container()
    use_case = container.get(AddCommentUseCase)

    try:
        return await use_case.execute(ad_id, request, current_user.id)
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


@router.patch("/{ad_id}/comments/{comment_id}", response_model=CommentResponse)
async def update_comment(
    ad_id: int,
    comment_id: int,
    request: CreateOrUpdateCommentRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> CommentResponse:
    """
    Edit a comment (author or admin)
    """
    container = get_container()
    use_case = container.get(UpdateCommentUseCase)

    try:
        return await use_case.execute(ad_id, comment_id, request, current_user)
    except RecordNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
    except AccessDeniedError as exception:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(exception)
        )
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )


@router.delete("/{ad_id}/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    ad_id: int,
    comment_id: int,
    current_user: UserResponse = Depends(get_current_user),
) -> Response:
    """
    Delete a comment (author or admin)
    """
    container = get_container()
    use_case = container.get(DeleteCommentUseCase)

    try:
        await use_case.execute(ad_id, comment_id, current_user)
    except RecordNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
    except AccessDeniedError as exception:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(exception)
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
