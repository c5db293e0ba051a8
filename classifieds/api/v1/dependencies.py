"""
Bearer-token authentication shared by the user, ad and comment routers.
"""
# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import UserResponse
from ...domain.exceptions import AuthenticationError
from ...di.container import get_container


bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserResponse:
    """
    Resolve the authenticated user from the Authorization header

    Raises:
        HTTPException: 401 with a Bearer challenge if the header is missing,
            the token is invalid or its user no longer exists
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    use_case = get_container().get(GetCurrentUserUseCase)
    try:
        return await use_case.execute(credentials.credentials)
    except AuthenticationError as exception:
        raise _unauthorized(str(exception))
