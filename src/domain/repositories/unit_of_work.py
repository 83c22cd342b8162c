"""Unit of Work protocol."""

from typing import Protocol

from domain.repositories.book_repository import IBookRepository
from domain.repositories.event_repository import IEventRepository
from domain.repositories.music_repository import IMusicRepository
from domain.repositories.owner_info_repository import IOwnerInfoRepository
from domain.repositories.profile_repository import IProfileRepository


class IUnitOfWork(Protocol):
    """Unit of Work interface for managing transactions."""

    profiles: IProfileRepository
    owner_infos: IOwnerInfoRepository
    events: IEventRepository
    books: IBookRepository
    music: IMusicRepository

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
