"""Owner info repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.owner_info import OwnerInfo


class IOwnerInfoRepository(Protocol):
    """Repository interface for OwnerInfo entities."""

    async def get_by_owner(self, owner_id: UUID) -> OwnerInfo | None:
        """Get the owner info of a member, if any."""
        ...

    async def create(self, owner_info: OwnerInfo) -> OwnerInfo:
        """Insert a new owner info row."""
        ...
