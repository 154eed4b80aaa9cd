# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import UserResponse
from ...core.exceptions import AuthError
from ...di.container import get_container


# Missing credentials are reported through AuthError so they share the 401 envelope
security_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> UserResponse:
    """
    FastAPI dependency to get current authenticated user from JWT token

    Args:
        credentials: HTTP Bearer token credentials, if any

    Returns:
        UserResponse with user information

    Raises:
        AuthError: If the token is missing, invalid or its user is gone
    """
    if credentials is None:
        raise AuthError("Missing bearer token", user_message="Not authenticated")

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    return await get_current_user_use_case.execute(credentials.credentials)
