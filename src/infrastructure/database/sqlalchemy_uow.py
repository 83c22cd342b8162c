"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.repositories.sqlalchemy_book_repo import SQLAlchemyBookRepository
from infrastructure.database.repositories.sqlalchemy_event_repo import SQLAlchemyEventRepository
from infrastructure.database.repositories.sqlalchemy_music_repo import SQLAlchemyMusicRepository
from infrastructure.database.repositories.sqlalchemy_owner_info_repo import (
    SQLAlchemyOwnerInfoRepository,
)
from infrastructure.database.repositories.sqlalchemy_profile_repo import (
    SQLAlchemyProfileRepository,
)


class SQLAlchemyUnitOfWork:
    """Unit of Work implementation using SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    def _require_session(self) -> AsyncSession:
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._session

    @property
    def profiles(self) -> SQLAlchemyProfileRepository:
        """Get profile repository."""
        return SQLAlchemyProfileRepository(self._require_session())

    @property
    def owner_infos(self) -> SQLAlchemyOwnerInfoRepository:
        """Get owner info repository."""
        return SQLAlchemyOwnerInfoRepository(self._require_session())

    @property
    def events(self) -> SQLAlchemyEventRepository:
        """Get event repository."""
        return SQLAlchemyEventRepository(self._require_session())

    @property
    def books(self) -> SQLAlchemyBookRepository:
        """Get book repository."""
        return SQLAlchemyBookRepository(self._require_session())

    @property
    def music(self) -> SQLAlchemyMusicRepository:
        """Get music repository."""
        return SQLAlchemyMusicRepository(self._require_session())

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter the context manager and create session."""
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager and cleanup."""
        if self._session:
            if exc_type:
                await self.rollback()
            await self._session.close()
            self._session = None
