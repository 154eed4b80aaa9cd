"""
Exception handlers translating errors into the response envelope.

``UserDirectoryError`` subclasses carry their own status and code.
Request validation failures from FastAPI/pydantic become a 400
``VALIDATION_ERROR`` listing one message per violated field, and plain
HTTP errors from routing (unknown path, wrong method) keep their status.
"""

# Standard library imports
import logging
from typing import Any, Dict, List, Sequence

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ..application.dto.envelope import ErrorResponse, FieldError
from ..core.exceptions import UserDirectoryError, ValidationError

logger = logging.getLogger(__name__)

HTTP_ERROR_CODES: Dict[int, str] = {
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


def _error_response(
    status_code: int,
    body: ErrorResponse,
    headers: Dict[str, str] | None = None,
) -> JSONResponse:
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {**(headers or {}), "WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def _field_name(loc: Sequence[Any]) -> str:
    """Last string component of a pydantic error location, e.g. ('body', 'fullName')."""
    for part in reversed(loc):
        if isinstance(part, str):
            return part
    return "body"


def collect_field_errors(errors: Sequence[Dict[str, Any]]) -> List[FieldError]:
    """
    Reduce pydantic errors to one message per field, keeping field order.

    Args:
        errors: Output of ``RequestValidationError.errors()``

    Returns:
        FieldError list with wire (alias) field names
    """
    collected: Dict[str, FieldError] = {}
    for error in errors:
        field = _field_name(error.get("loc", ()))
        if field in collected:
            continue
        if error.get("type") == "missing":
            message = f"{field} is required"
        else:
            message = error.get("msg", "Invalid value")
        collected[field] = FieldError(field=field, message=message)
    return list(collected.values())


async def user_directory_error_handler(request: Request, exception: UserDirectoryError) -> JSONResponse:
    if exception.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exception.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exception.status_code} {exception.code}")

    errors = None
    if isinstance(exception, ValidationError):
        errors = [FieldError(**error) for error in exception.errors]

    return _error_response(
        exception.status_code,
        ErrorResponse(code=exception.code, message=exception.user_message, errors=errors),
    )


async def request_validation_error_handler(request: Request, exception: RequestValidationError) -> JSONResponse:
    field_errors = collect_field_errors(exception.errors())
    logger.info(
        f"{request.method} {request.url.path} -> 400 VALIDATION_ERROR "
        f"({', '.join(error.field for error in field_errors)})"
    )
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(code=ValidationError.code, message="Validation error", errors=field_errors),
    )


async def http_error_handler(request: Request, exception: StarletteHTTPException) -> JSONResponse:
    return _error_response(
        exception.status_code,
        ErrorResponse(
            code=HTTP_ERROR_CODES.get(exception.status_code, "HTTP_ERROR"),
            message=str(exception.detail),
        ),
        headers=getattr(exception, "headers", None),
    )


def register_exception_handlers(application: FastAPI) -> None:
    """Attach all envelope-producing exception handlers to the app"""
    application.add_exception_handler(UserDirectoryError, user_directory_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_error_handler)
    application.add_exception_handler(StarletteHTTPException, http_error_handler)
