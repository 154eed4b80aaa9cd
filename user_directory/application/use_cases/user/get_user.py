# Standard library imports
import re
from typing import Union

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....core.exceptions import NotFoundError, ValidationError
from ...dto.user_dto import UserResponse

# ASCII digits only, with an optional sign
USER_ID_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


class GetUserUseCase:
    """Use case for getting a user by ID"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: Union[str, int]) -> UserResponse:
        """
        Get a user by ID

        Args:
            user_id: Raw ID as taken from the request path

        Returns:
            UserResponse with user information

        Raises:
            ValidationError: If user_id is not an integer
            NotFoundError: If no user has that ID
        """
        if not USER_ID_PATTERN.fullmatch(str(user_id)):
            raise ValidationError(
                errors=[{"field": UserFields.WIRE_USER_ID, "message": "User ID must be an integer"}],
            )
        parsed_id = int(user_id)

        user = await self.user_repository.find_by_id(parsed_id)
        if user is None:
            raise NotFoundError(f"User {parsed_id} not found", user_message="User not found")

        return UserResponse.from_domain(user)
