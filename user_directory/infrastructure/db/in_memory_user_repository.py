# Standard library imports
import asyncio
import logging
from dataclasses import replace
from typing import List, Optional

# Local application imports
from ...core.exceptions import ConflictError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """
    Process-local implementation of UserRepository.

    Users live in an append-only list, so iteration order is registration
    order and nothing survives a restart. All access goes through an
    asyncio.Lock; ``add`` re-checks email uniqueness and assigns the next
    sequential ID while holding it.
    """

    def __init__(self) -> None:
        self._users: List[User] = []
        self._lock = asyncio.Lock()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for (exact match)

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        async with self._lock:
            return self._find_by_email_unlocked(email)

    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        async with self._lock:
            for user in self._users:
                if user.id == user_id:
                    return replace(user)
        return None

    async def list_all(self) -> List[User]:
        async with self._lock:
            return [replace(user) for user in self._users]

    async def count(self) -> int:
        async with self._lock:
            return len(self._users)

    async def add(self, user: User) -> User:
        """
        Append a new user

        Args:
            user: User domain model without an ID

        Returns:
            Stored User domain model with its ID set

        Raises:
            ValueError: If the user already carries an ID
            ConflictError: If the email is already registered
        """
        if user.id is not None:
            raise ValueError(f"User already has ID {user.id}")

        async with self._lock:
            if self._find_by_email_unlocked(user.email) is not None:
                raise ConflictError(f"Email {user.email} is already registered", user_message="Email already registered")

            stored = replace(user, id=len(self._users) + 1)
            self._users.append(stored)

        logger.debug(f"Stored user {stored.id}")
        return replace(stored)

    def _find_by_email_unlocked(self, email: str) -> Optional[User]:
        for user in self._users:
            if user.email == email:
                return replace(user)
        return None
