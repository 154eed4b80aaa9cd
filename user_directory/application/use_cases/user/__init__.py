from .list_users import ListUsersUseCase
from .get_user import GetUserUseCase

__all__ = [
    "ListUsersUseCase",
    "GetUserUseCase",
]
