from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse
from .envelope import ApiResponse, ErrorResponse, FieldError

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "ApiResponse",
    "ErrorResponse",
    "FieldError",
]
