from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .user_provider import UserProvider


__all__ = [
    "RepositoryProvider",
    "AuthProvider",
    "UserProvider",
]
