"""Music domain entity."""

from dataclasses import dataclass


@dataclass
class Music:
    """Domain entity for a music track."""

    title: str
    id: int | None = None
    author: str | None = None
    category: str | None = None
    music_url: str | None = None
    cover_url: str | None = None
