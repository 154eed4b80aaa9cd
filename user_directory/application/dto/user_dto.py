from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.constants import UserFields
from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    full_name: str = Field(alias=UserFields.WIRE_FULL_NAME)
    email: str
    bio: Optional[str] = None
    dob: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or 0,
            full_name=user.full_name,
            email=user.email,
            bio=user.bio,
            dob=user.dob,
        )
