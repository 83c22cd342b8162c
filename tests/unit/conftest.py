"""Shared fixtures for unit tests."""

from datetime import date, datetime
from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from core.exceptions import FetchError, PersistenceError
from domain.entities.owner_info import OwnerInfo

# 15:30 in the platform timezone; a fixed clock keeps ages and greetings stable
FIXED_NOW = datetime(2025, 6, 15, 15, 30)


class FakeUnitOfWork:
    """Fake Unit of Work with a mock for every repository."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.owner_infos = AsyncMock()
        self.events = AsyncMock()
        self.books = AsyncMock()
        self.music = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


class FakeOwnerInfoStore:
    """In-memory owner info store that records every call.

    Set ``fail_lookup`` / ``fail_create`` to make the next calls raise the
    store's error types.
    """

    def __init__(self, records: dict[UUID, OwnerInfo] | None = None) -> None:
        self.records: dict[UUID, OwnerInfo] = dict(records or {})
        self.lookups: list[UUID] = []
        self.created: list[OwnerInfo] = []
        self.fail_lookup = False
        self.fail_create = False

    async def lookup(self, owner_id: UUID) -> OwnerInfo | None:
        self.lookups.append(owner_id)
        if self.fail_lookup:
            raise FetchError("owner info", RuntimeError("connection reset"))
        return self.records.get(owner_id)

    async def create(self, record: OwnerInfo) -> OwnerInfo:
        if self.fail_create:
            raise PersistenceError("owner info", RuntimeError("insert failed"))
        self.created.append(record)
        self.records[record.owner_id] = record
        return record


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def owner_store() -> FakeOwnerInfoStore:
    return FakeOwnerInfoStore()


@pytest.fixture
def user_id() -> UUID:
    """A random user ID."""
    return uuid4()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def owner_info(user_id: UUID) -> OwnerInfo:
    """A stored record for ``user_id``."""
    return OwnerInfo(
        owner_id=user_id,
        full_name="Ana Pérez",
        birth_date=date(2010, 5, 1),
        nationality="PE",
    )
