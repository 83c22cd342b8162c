"""SQLAlchemy implementation of OwnerInfo repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.owner_info import OwnerInfo
from infrastructure.database.models import OwnerInfoModel


class SQLAlchemyOwnerInfoRepository:
    """SQLAlchemy implementation of IOwnerInfoRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_owner(self, owner_id: UUID) -> OwnerInfo | None:
        """Get the owner info of a member, if any."""
        stmt = select(OwnerInfoModel).where(OwnerInfoModel.owner_id == owner_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, owner_info: OwnerInfo) -> OwnerInfo:
        """Insert a new owner info row. Fails on a duplicate owner."""
        model = OwnerInfoModel(
            owner_id=owner_info.owner_id,
            full_name=owner_info.full_name,
            birth_date=owner_info.birth_date,
            nationality=owner_info.nationality,
            stored_age=owner_info.stored_age,
            created_at=owner_info.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    def _to_entity(self, model: OwnerInfoModel) -> OwnerInfo:
        """Convert ORM model to domain entity."""
        return OwnerInfo(
            owner_id=model.owner_id,
            full_name=model.full_name,
            birth_date=model.birth_date,
            nationality=model.nationality,
            stored_age=model.stored_age,
            created_at=model.created_at,
        )
