# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.envelope import ApiResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...di.container import get_container


router = APIRouter(tags=["users"])


@router.get("/", response_model=ApiResponse[List[UserResponse]])
async def list_users() -> ApiResponse[List[UserResponse]]:
    """
    List all registered users

    Returns:
        Envelope with public views in registration order
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)

    users = await list_users_use_case.execute()
    return ApiResponse[List[UserResponse]](message="Users retrieved", data=users)


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(user_id: str) -> ApiResponse[UserResponse]:
    """
    Get a user by ID

    The ID is taken as raw text so that a non-numeric value is reported
    by the use case as a validation error.

    Args:
        user_id: ID of the user

    Returns:
        Envelope with the user's public view
    """
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)

    user = await get_user_use_case.execute(user_id)
    return ApiResponse[UserResponse](message="User retrieved", data=user)
