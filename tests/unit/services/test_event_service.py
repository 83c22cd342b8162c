"""Unit tests for EventService."""

from datetime import date

import pytest

from core.exceptions import EventNotFoundError, MissingFieldError
from domain.entities.event import Event
from domain.services.event_service import EventService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> EventService:
    return EventService(lambda: uow)


class TestGetAll:
    async def test_returns_repository_order(self, service: EventService, uow: FakeUnitOfWork):
        events = [
            Event(id=2, name="Final", date=date(2025, 7, 20)),
            Event(id=1, name="Clasificatoria", date=date(2025, 7, 1)),
        ]
        uow.events.get_all.return_value = events

        result = await service.get_all()

        assert result == events


class TestCreate:
    async def test_creates_event(self, service: EventService, uow: FakeUnitOfWork):
        uow.events.create.side_effect = lambda e: Event(
            id=7, name=e.name, date=e.date, description=e.description, cover=e.cover
        )

        result = await service.create(
            name=" Torneo ",
            event_date=date(2025, 7, 20),
            description="Final en vivo",
            cover="  ",
        )

        assert result.id == 7
        assert result.name == "Torneo"
        assert result.cover is None
        assert uow.committed

    async def test_requires_name(self, service: EventService, uow: FakeUnitOfWork):
        with pytest.raises(MissingFieldError):
            await service.create(name="  ", event_date=date(2025, 7, 20))

        uow.events.create.assert_not_called()

    async def test_requires_date(self, service: EventService, uow: FakeUnitOfWork):
        with pytest.raises(MissingFieldError) as exc_info:
            await service.create(name="Torneo", event_date=None)

        assert exc_info.value.details == {"field": "date"}
        uow.events.create.assert_not_called()


class TestSetWinner:
    async def test_records_winner(self, service: EventService, uow: FakeUnitOfWork):
        event = Event(id=3, name="Torneo", date=date(2025, 7, 20))
        uow.events.get.return_value = event
        uow.events.update.side_effect = lambda e: e

        result = await service.set_winner(3, " Luis ")

        assert result.winner == "Luis"
        assert uow.committed

    async def test_missing_event(self, service: EventService, uow: FakeUnitOfWork):
        uow.events.get.return_value = None

        with pytest.raises(EventNotFoundError):
            await service.set_winner(404, "Luis")

        assert not uow.committed

    async def test_blank_winner(self, service: EventService, uow: FakeUnitOfWork):
        with pytest.raises(MissingFieldError):
            await service.set_winner(3, "")

        uow.events.get.assert_not_called()


class TestDelete:
    async def test_deletes_event(self, service: EventService, uow: FakeUnitOfWork):
        uow.events.delete.return_value = True

        await service.delete(3)

        uow.events.delete.assert_called_once_with(3)
        assert uow.committed

    async def test_missing_event(self, service: EventService, uow: FakeUnitOfWork):
        uow.events.delete.return_value = False

        with pytest.raises(EventNotFoundError):
            await service.delete(3)

        assert not uow.committed
