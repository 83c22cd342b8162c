"""Owner info store backing the profile completeness gate."""

from typing import Callable
from uuid import UUID

import structlog
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import FetchError, PersistenceError
from domain.entities.owner_info import OwnerInfo
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class UnitOfWorkOwnerInfoStore:
    """OwnerInfoStore over the unit of work.

    Each call runs in its own transaction. Database failures, including an
    unreachable server (which asyncpg reports as a plain OSError), are
    reported as FetchError / PersistenceError.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def lookup(self, owner_id: UUID) -> OwnerInfo | None:
        try:
            async with self._uow_factory() as uow:
                return await uow.owner_infos.get_by_owner(owner_id)
        except (SQLAlchemyError, OSError) as e:
            logger.error("owner_info_lookup_failed", owner_id=str(owner_id), error=str(e))
            raise FetchError("owner info", e) from e

    async def create(self, record: OwnerInfo) -> OwnerInfo:
        try:
            async with self._uow_factory() as uow:
                created = await uow.owner_infos.create(record)
                await uow.commit()
                return created
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                "owner_info_create_failed",
                owner_id=str(record.owner_id),
                error=str(e),
            )
            raise PersistenceError("owner info", e) from e
