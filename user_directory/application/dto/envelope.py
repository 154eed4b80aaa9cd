"""
Response envelope shared by every endpoint.

Success bodies are ``{"status": "success", "message", "data"}``; failures are
``{"status": "failed", "code", "message", "errors"?}``.
"""
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel


DataT = TypeVar("DataT")

STATUS_SUCCESS = "success"
STATUS_FAILED = "failed"


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope for successful responses"""
    status: str = STATUS_SUCCESS
    message: str
    data: Optional[DataT] = None


class FieldError(BaseModel):
    """One violated request field"""
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Envelope for failed responses"""
    status: str = STATUS_FAILED
    code: str
    message: str
    errors: Optional[List[FieldError]] = None
