"""Minimum-age eligibility checks.

The platform encodes its minimum age as a cutoff year: members must be born
strictly before it.
"""

from datetime import date
from typing import Any

from core.exceptions import IneligibleError, InvalidDateError
from domain.services.dates import parse_date


def _require_date(birth_date: Any) -> date:
    born = parse_date(birth_date)
    if born is None:
        raise InvalidDateError(birth_date)
    return born


def is_eligible(birth_date: Any, cutoff_year: int) -> bool:
    """Return False when the member was born in ``cutoff_year`` or later.

    Raises:
        InvalidDateError: If ``birth_date`` cannot be parsed
    """
    return _require_date(birth_date).year < cutoff_year


def ensure_eligible(birth_date: Any, cutoff_year: int) -> date:
    """Parse ``birth_date``, raising IneligibleError if it is past the cutoff."""
    born = _require_date(birth_date)
    if born.year >= cutoff_year:
        raise IneligibleError(born.year, cutoff_year)
    return born
