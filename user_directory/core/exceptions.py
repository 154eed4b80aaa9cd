"""
Error hierarchy for the User Directory service.

Use cases raise these; the API layer maps each one to an HTTP status and an
error code in the response envelope (see ``api.errors``).
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class UserDirectoryError(Exception):
    """Base exception for all User Directory errors."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class ValidationError(UserDirectoryError):
    """Raised when one or more request fields fail validation."""

    status_code = 400
    code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Validation error",
        errors: Optional[List[Dict[str, str]]] = None,
    ):
        super().__init__(message)
        self.errors = errors or []


class ConflictError(UserDirectoryError):
    """Raised when registering an email that is already taken."""

    status_code = 400
    code = "EMAIL_EXISTS"


class AuthError(UserDirectoryError):
    """Raised on unknown email, wrong password or an unusable token."""

    status_code = 401
    code = "UNAUTHORIZED"


class NotFoundError(UserDirectoryError):
    """Raised when no user has the requested id."""

    status_code = 404
    code = "NOT_FOUND"


# -----------------------------------------------------------------------------
# Server errors
# -----------------------------------------------------------------------------


class InternalError(UserDirectoryError):
    """Raised when password hashing fails."""

    status_code = 500
    code = "INTERNAL_ERROR"
