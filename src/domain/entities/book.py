"""Book domain entity."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Book:
    """Domain entity for a Book in the library section."""

    title: str
    id: int | None = None
    description: str | None = None
    cover_url: str | None = None
    portada_url: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
