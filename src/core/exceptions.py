"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"

    # Authorization errors (403)
    FORBIDDEN = "FORBIDDEN"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    BOOK_NOT_FOUND = "BOOK_NOT_FOUND"
    MUSIC_NOT_FOUND = "MUSIC_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_DATE = "INVALID_DATE"
    INELIGIBLE = "INELIGIBLE"

    # Profile completion (409)
    PROFILE_ALREADY_COMPLETE = "PROFILE_ALREADY_COMPLETE"
    INVALID_GATE_STATE = "INVALID_GATE_STATE"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500/503)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    FETCH_ERROR = "FETCH_ERROR"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"


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
    """Authentication failed."""

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


class MissingFieldError(AppException):
    """A required text field is absent or blank."""

    def __init__(self, field: str) -> None:
        super().__init__(
            error_code=ErrorCode.MISSING_FIELD,
            message=f"Field is required: {field}",
            status_code=400,
            details={"field": field},
        )


class InvalidDateError(AppException):
    """A date value could not be parsed or is out of range."""

    def __init__(self, value: Any, reason: str = "Invalid date") -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_DATE,
            message=f"{reason}: {value}",
            status_code=400,
            details={"value": str(value)},
        )


class IneligibleError(AppException):
    """Birth year is at or after the minimum-age cutoff."""

    def __init__(self, birth_year: int, cutoff_year: int) -> None:
        super().__init__(
            error_code=ErrorCode.INELIGIBLE,
            message="You are not old enough to join the platform",
            status_code=403,
            details={"birth_year": birth_year, "cutoff_year": cutoff_year},
        )


class FetchError(AppException):
    """Reading from the backing store failed for a reason other than absence."""

    def __init__(self, resource: str, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(
            error_code=ErrorCode.FETCH_ERROR,
            message=f"Could not load {resource}",
            status_code=503,
            details={"resource": resource, "cause": str(cause) if cause else None},
        )


class PersistenceError(AppException):
    """Writing to the backing store failed."""

    def __init__(self, resource: str, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(
            error_code=ErrorCode.PERSISTENCE_ERROR,
            message=f"Could not save {resource}",
            status_code=503,
            details={"resource": resource, "cause": str(cause) if cause else None},
        )


class ProfileAlreadyCompleteError(AppException):
    """Owner info already exists and cannot be submitted again."""

    def __init__(self, owner_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_ALREADY_COMPLETE,
            message="Personal information has already been provided",
            status_code=409,
            details={"owner_id": owner_id},
        )


class GateStateError(AppException):
    """Operation is not allowed in the gate's current state."""

    def __init__(self, state: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_GATE_STATE,
            message=f"Profile completion is not available in state: {state}",
            status_code=409,
            details={"state": state},
        )


class ProfileNotFoundError(AppException):
    """Member profile not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found: {user_id}",
            status_code=404,
            details={"user_id": user_id},
        )


class EventNotFoundError(AppException):
    """Event not found."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            error_code=ErrorCode.EVENT_NOT_FOUND,
            message=f"Event not found: {event_id}",
            status_code=404,
            details={"event_id": event_id},
        )


class BookNotFoundError(AppException):
    """Book not found."""

    def __init__(self, book_id: int) -> None:
        super().__init__(
            error_code=ErrorCode.BOOK_NOT_FOUND,
            message=f"Book not found: {book_id}",
            status_code=404,
            details={"book_id": book_id},
        )


class MusicNotFoundError(AppException):
    """Music track not found."""

    def __init__(self, music_id: int) -> None:
        super().__init__(
            error_code=ErrorCode.MUSIC_NOT_FOUND,
            message=f"Music not found: {music_id}",
            status_code=404,
            details={"music_id": music_id},
        )
