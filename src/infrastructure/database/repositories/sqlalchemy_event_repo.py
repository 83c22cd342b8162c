"""SQLAlchemy implementation of Event repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.event import Event
from infrastructure.database.models import EventModel


class SQLAlchemyEventRepository:
    """SQLAlchemy implementation of IEventRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: int) -> Event | None:
        """Get an event by ID."""
        model = await self._session.get(EventModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Event]:
        """Get all events, most recent date first."""
        stmt = select(EventModel).order_by(EventModel.event_date.desc(), EventModel.id.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, event: Event) -> Event:
        """Create a new event."""
        model = EventModel(
            name=event.name,
            event_date=event.date,
            description=event.description,
            winner=event.winner,
            cover=event.cover,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, event: Event) -> Event:
        """Update an existing event."""
        model = await self._session.get(EventModel, event.id)
        if not model:
            raise ValueError(f"Event {event.id} not found")

        model.name = event.name
        model.event_date = event.date
        model.description = event.description
        model.winner = event.winner
        model.cover = event.cover

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: int) -> bool:
        """Delete an event."""
        model = await self._session.get(EventModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: EventModel) -> Event:
        """Convert ORM model to domain entity."""
        return Event(
            id=model.id,
            name=model.name,
            date=model.event_date,
            description=model.description,
            winner=model.winner,
            cover=model.cover,
        )
