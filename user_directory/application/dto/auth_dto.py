# Standard library imports
import re
from datetime import date, datetime
from typing import Any, Optional

# External package imports
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

# Local application imports
from ...domain.constants import UserFields


# Same character class as a JS ``/\W/``: anything outside [A-Za-z0-9_]
SYMBOL_PATTERN = re.compile(r"\W", re.ASCII)
ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}(?:T.+)?", re.ASCII)
PASSWORD_MIN_LENGTH = 8
BCRYPT_MAX_BYTES = 72


def _require(value: Any, message: str) -> Any:
    """Reject null and empty-string input with a field specific message."""
    if value is None or value == "":
        raise PydanticCustomError("required", message)
    return value


def check_password_strength(value: str) -> str:
    if len(value) < PASSWORD_MIN_LENGTH:
        raise PydanticCustomError(
            "password_too_short",
            "Password must be at least {min_length} characters",
            {"min_length": PASSWORD_MIN_LENGTH},
        )
    if not SYMBOL_PATTERN.search(value):
        raise PydanticCustomError("password_no_symbol", "Password must contain at least one symbol")
    if len(value.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise PydanticCustomError(
            "password_too_long",
            "Password must be at most {max_bytes} bytes",
            {"max_bytes": BCRYPT_MAX_BYTES},
        )
    return value


def check_email_syntax(value: str) -> str:
    """Check email syntax and return the address exactly as submitted."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise PydanticCustomError("invalid_email", "Invalid email address: {reason}", {"reason": str(e)})
    return value


def check_iso_date(value: str) -> str:
    """
    Accept an extended ISO-8601 calendar date, optionally with a time part.

    The value is returned unchanged; only its shape and calendar validity are
    checked (``1990-02-30`` is rejected).
    """
    if not ISO_DATE_PATTERN.fullmatch(value):
        raise PydanticCustomError("invalid_date", "Invalid date of birth format. Use YYYY-MM-DD.")
    try:
        if len(value) == 10:
            date.fromisoformat(value)
        else:
            datetime.fromisoformat(value)
    except ValueError:
        raise PydanticCustomError("invalid_date", "Invalid date of birth format. Use YYYY-MM-DD.")
    return value


class CredentialsRequest(BaseModel):
    """Email and password fields shared by registration and login"""
    email: str
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def email_required(cls, value: Any) -> Any:
        return _require(value, "Email is required")

    @field_validator("email")
    @classmethod
    def email_format(cls, value: str) -> str:
        return check_email_syntax(value)

    @field_validator("password", mode="before")
    @classmethod
    def password_required(cls, value: Any) -> Any:
        return _require(value, "Password is required")

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        return check_password_strength(value)


class UserRegistrationRequest(CredentialsRequest):
    """DTO for user registration request"""
    model_config = ConfigDict(populate_by_name=True)

    full_name: str = Field(alias=UserFields.WIRE_FULL_NAME)
    bio: Optional[str] = None
    dob: str

    @field_validator("full_name", mode="before")
    @classmethod
    def full_name_required(cls, value: Any) -> Any:
        return _require(value, "Full name is required")

    @field_validator("dob", mode="before")
    @classmethod
    def dob_required(cls, value: Any) -> Any:
        return _require(value, "Date of birth is required")

    @field_validator("dob")
    @classmethod
    def dob_format(cls, value: str) -> str:
        return check_iso_date(value)


class UserLoginRequest(CredentialsRequest):
    """DTO for user login request"""


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    model_config = ConfigDict(populate_by_name=True)

    token: str
    token_type: str = Field(default="bearer", alias=UserFields.WIRE_TOKEN_TYPE)
