"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Authorization errors (403)
    FORBIDDEN = "FORBIDDEN"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Validation errors (400/422)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    FIELD_NOT_EDITABLE = "FIELD_NOT_EDITABLE"

    # Conflict errors (409)
    INVALID_SESSION_STATE = "INVALID_SESSION_STATE"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500/503)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    STORE_ERROR = "STORE_ERROR"


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


class AuthenticationError(AppException):
    """No caller identity could be established.

    Raised when a profile is requested with neither an explicit profile id
    nor an authenticated caller; clients should redirect to login.
    """

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
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


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, lookup_value: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found: {lookup_value}",
            status_code=404,
            details={"profile": lookup_value},
        )


class ProfileValidationError(AppException):
    """Submitted profile data failed field validation.

    ``errors`` maps each failing field to a single message.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message="Profile data is invalid",
            status_code=422,
            details=self.errors,
        )


class FieldNotEditableError(AppException):
    """The field is not part of the editable profile fields."""

    def __init__(self, field_name: str) -> None:
        super().__init__(
            error_code=ErrorCode.FIELD_NOT_EDITABLE,
            message=f"Field is not editable: {field_name}",
            status_code=400,
            details={"field": field_name},
        )


class InvalidSessionStateError(AppException):
    """An edit session operation was attempted from the wrong state."""

    def __init__(self, operation: str, state: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_SESSION_STATE,
            message=f"Cannot {operation} while session is {state}",
            status_code=409,
            details={"operation": operation, "state": state},
        )


class StoreError(AppException):
    """The persistence store failed to complete a read or write.

    The message is surfaced to the caller verbatim.
    """

    def __init__(self, message: str) -> None:
        super().__init__(
            error_code=ErrorCode.STORE_ERROR,
            message=message,
            status_code=503,
        )
