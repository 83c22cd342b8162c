"""Event repository protocol."""

from typing import Protocol

from domain.entities.event import Event


class IEventRepository(Protocol):
    """Repository interface for Event entities."""

    async def get(self, id: int) -> Event | None:
        """Get an event by ID."""
        ...

    async def get_all(self) -> list[Event]:
        """Get all events, most recent date first."""
        ...

    async def create(self, event: Event) -> Event:
        """Create a new event."""
        ...

    async def update(self, event: Event) -> Event:
        """Update an existing event."""
        ...

    async def delete(self, id: int) -> bool:
        """Delete an event and return success status."""
        ...
