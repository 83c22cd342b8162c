"""Event service layer with business logic."""

from datetime import date
from typing import Callable, List, Optional

import structlog

from core.exceptions import EventNotFoundError, MissingFieldError
from domain.entities.event import Event
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.validation import optional_text, require_text

logger = structlog.get_logger()


class EventService:
    """Service layer for Event business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> List[Event]:
        """Get all events, most recent date first."""
        async with self._uow_factory() as uow:
            return await uow.events.get_all()  # type: ignore[no-any-return]

    async def create(
        self,
        name: str,
        event_date: Optional[date],
        description: Optional[str] = None,
        winner: Optional[str] = None,
        cover: Optional[str] = None,
    ) -> Event:
        """Create a new event. Name and date are mandatory."""
        name = require_text(name, "name")
        if event_date is None:
            raise MissingFieldError("date")

        event = Event(
            name=name,
            date=event_date,
            description=optional_text(description),
            winner=optional_text(winner),
            cover=optional_text(cover),
        )

        async with self._uow_factory() as uow:
            created = await uow.events.create(event)
            await uow.commit()

        logger.info("event_created", event_id=created.id)
        return created

    async def set_winner(self, event_id: int, winner: str) -> Event:
        """Record the winner of an event."""
        winner = require_text(winner, "winner")
        async with self._uow_factory() as uow:
            event = await uow.events.get(event_id)
            if not event:
                raise EventNotFoundError(event_id)

            event.winner = winner
            updated = await uow.events.update(event)
            await uow.commit()
            return updated

    async def delete(self, event_id: int) -> None:
        """Delete an event."""
        async with self._uow_factory() as uow:
            deleted = await uow.events.delete(event_id)
            if not deleted:
                raise EventNotFoundError(event_id)
            await uow.commit()

        logger.info("event_deleted", event_id=event_id)
