# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....core.exceptions import AuthError
from ....core.security import decode_jwt_token
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user from JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, token: str) -> UserResponse:
        """
        Get current user from JWT token

        Args:
            token: JWT access token

        Returns:
            UserResponse with user information

        Raises:
            AuthError: If token is invalid, expired or its user is gone
        """
        try:
            payload = decode_jwt_token(token)
        except ValueError as exception:
            raise AuthError(str(exception), user_message="Invalid or expired token")

        subject: Optional[str] = payload.get(UserFields.SUBJECT)
        try:
            user_id = int(subject)
        except (TypeError, ValueError):
            raise AuthError("Invalid authentication payload: missing user ID", user_message="Invalid or expired token")

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise AuthError(f"User {user_id} not found", user_message="User not found")

        return UserResponse.from_domain(user)
