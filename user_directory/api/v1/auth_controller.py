# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from ...application.dto.envelope import ApiResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=ApiResponse[UserResponse], status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> ApiResponse[UserResponse]:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        Envelope with the created user's public view
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    user = await register_use_case.execute(request)
    return ApiResponse[UserResponse](message="Registration successful", data=user)


@router.post("/login", response_model=ApiResponse[TokenResponse])
async def login_user(request: UserLoginRequest) -> ApiResponse[TokenResponse]:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        Envelope with the access token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    token_response = await login_use_case.execute(request)
    return ApiResponse[TokenResponse](message="Login successful", data=token_response)


@router.get("/me", response_model=ApiResponse[UserResponse])
async def get_me(current_user: UserResponse = Depends(get_current_user)) -> ApiResponse[UserResponse]:
    """Public view of the user the bearer token was issued to"""
    return ApiResponse[UserResponse](message="Current user retrieved", data=current_user)
