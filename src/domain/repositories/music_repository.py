"""Music repository protocol."""

from typing import Protocol

from domain.entities.music import Music


class IMusicRepository(Protocol):
    """Repository interface for Music entities."""

    async def get(self, id: int) -> Music | None:
        """Get a track by ID."""
        ...

    async def get_all(self) -> list[Music]:
        """Get all tracks, newest first."""
        ...

    async def create(self, music: Music) -> Music:
        """Create a new track."""
        ...

    async def update(self, music: Music) -> Music:
        """Update an existing track."""
        ...

    async def delete(self, id: int) -> bool:
        """Delete a track and return success status."""
        ...
