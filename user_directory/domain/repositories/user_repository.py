from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """Return every user in insertion order"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of stored users"""
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        """
        Insert a new user and assign its ID.

        Implementations must check email uniqueness and assign the ID as a
        single atomic step, raising ConflictError on a duplicate email.
        """
        pass
