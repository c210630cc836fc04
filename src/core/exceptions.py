"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    NOT_LOGGED_IN = "NOT_LOGGED_IN"

    # Authorization errors (403)
    FORBIDDEN = "FORBIDDEN"
    PRIVATE_PROFILE = "PRIVATE_PROFILE"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Conflict errors (409)
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class NotLoggedInError(AppException):
    """The session has no current user."""

    def __init__(self, message: str = "Not logged in") -> None:
        super().__init__(
            error_code=ErrorCode.NOT_LOGGED_IN,
            message=message,
            status_code=401,
        )


class AuthorizationError(AppException):
    """Authorization failed."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(
            error_code=ErrorCode.FORBIDDEN,
            message=message,
            status_code=403,
        )


class PrivateProfileError(AppException):
    """Profile is private and the viewer does not own it."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PRIVATE_PROFILE,
            message="This profile is set to private by the user",
            status_code=403,
            details={"profile_id": profile_id},
        )


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found: {profile_id}",
            status_code=404,
            details={"profile_id": profile_id},
        )


class DuplicateEmailError(AppException):
    """Another profile already uses this email."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.DUPLICATE_EMAIL,
            message="Email already exists",
            status_code=409,
            details={"email": email},
        )


class ProfileValidationError(AppException):
    """Submitted profile form failed validation."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message="Please correct the errors before submitting",
            status_code=400,
            details=[{"field": field, "message": message} for field, message in errors.items()],
        )
