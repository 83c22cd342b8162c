"""Field-level checks shared by the services."""

import re

from core.exceptions import AppException, ErrorCode, MissingFieldError

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
PIN_PATTERN = re.compile(r"^\d{4,6}$")


def require_text(value: str | None, field: str) -> str:
    """Return ``value`` trimmed, raising MissingFieldError if it is blank."""
    text = (value or "").strip()
    if not text:
        raise MissingFieldError(field)
    return text


def optional_text(value: str | None) -> str | None:
    """Trim ``value``; blank becomes None."""
    if value is None:
        return None
    return value.strip() or None


def require_email(value: str | None) -> str:
    email = require_text(value, "email")
    if not EMAIL_PATTERN.search(email):
        raise AppException(
            ErrorCode.VALIDATION_ERROR,
            "Invalid email address",
            400,
            {"field": "email"},
        )
    return email


def optional_pin(value: str | None) -> str | None:
    """A PIN is optional, but when present must be 4 to 6 digits."""
    pin = optional_text(value)
    if pin is not None and not PIN_PATTERN.match(pin):
        raise AppException(
            ErrorCode.VALIDATION_ERROR,
            "PIN must be 4 to 6 digits",
            400,
            {"field": "pin"},
        )
    return pin
