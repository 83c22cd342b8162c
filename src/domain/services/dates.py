"""Date helpers shared by the member-facing views.

All functions are pure: the reference instant is always passed in, never
read from the system clock.
"""

from datetime import date, datetime
from typing import Any
from zoneinfo import ZoneInfo

from core.config import settings


def local_now() -> datetime:
    """Current time in the platform timezone."""
    return datetime.now(ZoneInfo(settings.timezone))


def parse_date(value: Any) -> date | None:
    """Coerce ``value`` into a calendar date.

    Accepts ``date``/``datetime`` objects, ``YYYY-MM-DD`` strings and ISO
    timestamps. Anything else (including ``None`` and blank strings) yields
    ``None``.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def age_in_years(birth_date: Any, as_of: date | datetime) -> int | None:
    """Whole years between ``birth_date`` and ``as_of``.

    Returns ``None`` when the birth date is missing or unparseable.
    """
    born = parse_date(birth_date)
    if born is None:
        return None
    today = as_of.date() if isinstance(as_of, datetime) else as_of

    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def format_display_date(value: Any) -> str:
    """Format a date the way ``es-ES`` short dates read (``1/5/2010``)."""
    parsed = parse_date(value)
    if parsed is None:
        return "-"
    return f"{parsed.day}/{parsed.month}/{parsed.year}"


def greeting_for_hour(hour: int) -> str:
    """Time-of-day greeting shown in the member area."""
    if 5 <= hour < 12:
        return "Buenos días"
    if 12 <= hour < 20:
        return "Buenas tardes"
    return "Buenas noches"
