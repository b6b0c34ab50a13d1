# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized error handling for the API.
# Every error the service raises on purpose is a UsersApiException, which
# knows its HTTP status and renders a uniform JSON envelope:
#   {"detail": "...", "code": "...", "suggestion": "...", "details": {...}}
# Anything else reaching the handlers becomes a 500 INTERNAL_ERROR.
# =============================================================================

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# MongoDB server error codes for unique index violations
DUPLICATE_KEY_CODES = frozenset({11000, 11001})


class UsersApiException(Exception):
    """
    Base exception for the Users API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "USERS_API_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# User Exceptions
# =============================================================================

class UserValidationError(UsersApiException):
    """Raised when user data is missing a required field or is malformed."""

    def __init__(self, errors: list[dict[str, Any]]):
        fields = sorted({str(err["loc"][-1]) for err in errors if err.get("loc")})
        super().__init__(
            message=f"Invalid user data: {', '.join(fields) or 'body'}",
            code="VALIDATION_ERROR",
            status_code=422,
            suggestion="Provide non-empty 'name' and 'email' values",
            details={"fields": fields},
        )


class DuplicateUserError(UsersApiException):
    """Raised when a write collides with an existing user's name or email."""

    def __init__(self, key: dict[str, Any] | None, storage_code: int | None = 11000):
        key = key or {}
        fields = ", ".join(key) or "name or email"
        super().__init__(
            message=f"A user with this {fields} already exists",
            code="DUPLICATE_KEY",
            status_code=409,
            suggestion="Choose a different name and email",
            details={"key": key, "storage_code": storage_code},
        )
        self.storage_code = storage_code


class UserNotFoundError(UsersApiException):
    """Raised when a user ID doesn't exist."""

    def __init__(self, user_id: str):
        super().__init__(
            message=f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            status_code=404,
            suggestion="Check that the user id is correct and the user wasn't deleted",
            details={"user_id": user_id},
        )


class InvalidUserIdError(UsersApiException):
    """Raised when a user ID is not a valid ObjectId."""

    def __init__(self, user_id: str):
        super().__init__(
            message=f"Invalid user id: {user_id}",
            code="INVALID_USER_ID",
            status_code=400,
            suggestion="User ids are 24-character hexadecimal strings",
            details={"user_id": user_id},
        )


# =============================================================================
# Storage Exceptions
# =============================================================================

class StorageConnectionError(UsersApiException):
    """Raised when MongoDB cannot be reached. Fatal at startup."""

    def __init__(self, uri: str, error: str):
        super().__init__(
            message=f"Failed to connect to storage: {error}",
            code="STORAGE_CONNECTION_FAILED",
            status_code=503,
            suggestion="Check MONGODB_URI and that the MongoDB server is running",
            details={"error": error},
        )
        self.uri = uri


# =============================================================================
# Exception Handlers
# =============================================================================

async def users_api_exception_handler(
    request: Request,
    exc: UsersApiException
) -> JSONResponse:
    """
    Convert UsersApiException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Converts pydantic errors to user-friendly messages.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": [
                {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                for err in exc.errors()
            ],
        }
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Attach the error handlers to an app.

    Called after every router is included so the handlers sit at the end
    of the chain.
    """
    app.add_exception_handler(UsersApiException, users_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
