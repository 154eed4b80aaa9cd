# Standard library imports
import asyncio
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.exceptions import ConflictError, InternalError
from ....core.security import hash_password
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        The email is checked before hashing so duplicates fail fast; the
        repository checks it again atomically when the record is appended.

        Args:
            request: Validated registration request

        Returns:
            UserResponse with created user information

        Raises:
            ConflictError: If user with email already exists
            InternalError: If the password could not be hashed
        """
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            logger.info(f"Registration rejected, email already registered: {request.email}")
            raise ConflictError(
                f"Email {request.email} is already registered",
                user_message="Email already registered",
            )

        # bcrypt is CPU bound; keep it off the event loop
        try:
            hashed_password = await asyncio.to_thread(hash_password, request.password)
        except Exception as exception:
            logger.error(f"Password hashing failed: {exception}", exc_info=True)
            raise InternalError(
                f"Password hashing failed: {exception}",
                user_message="Internal Server Error",
            ) from exception

        new_user = User(
            id=None,  # Assigned by repository
            full_name=request.full_name,
            email=request.email,
            hashed_password=hashed_password,
            bio=request.bio,
            dob=request.dob,
        )

        saved_user = await self.user_repository.add(new_user)
        logger.info(f"Registered user {saved_user.id}")

        return UserResponse.from_domain(saved_user)
