# Standard library imports
import asyncio
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....core.exceptions import AuthError
from ....core.security import verify_password, create_jwt_token
from ...dto.auth_dto import UserLoginRequest, TokenResponse

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> TokenResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            TokenResponse carrying a signed access token

        Raises:
            AuthError: If the email is unknown or the password does not match
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            logger.info("Login failed: unknown email")
            raise AuthError(f"No user with email {request.email}", user_message="Email not found")

        matches = await asyncio.to_thread(verify_password, request.password, user.hashed_password)
        if not matches:
            logger.info(f"Login failed: wrong password for user {user.id}")
            raise AuthError(f"Password mismatch for user {user.id}", user_message="Incorrect password")

        token = create_jwt_token({
            UserFields.SUBJECT: str(user.id),  # JWT standard claim (subject)
            UserFields.EMAIL: user.email,
        })

        return TokenResponse(token=token)
