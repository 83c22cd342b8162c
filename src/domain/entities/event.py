"""Event domain entity."""

from dataclasses import dataclass
from datetime import date


@dataclass
class Event:
    """Domain entity for a community event."""

    name: str
    date: date
    id: int | None = None
    description: str | None = None
    winner: str | None = None
    cover: str | None = None
