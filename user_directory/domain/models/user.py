from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[int]
    full_name: str
    email: str
    hashed_password: str
    dob: str
    bio: Optional[str] = None

    def __post_init__(self):
        """Business validations"""
        if not self.full_name:
            raise ValueError("Full name is required")
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
        if not self.dob:
            raise ValueError("Date of birth is required")
