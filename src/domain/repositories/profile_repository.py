"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get(self, user_id: UUID) -> Profile | None:
        """Get a profile by user ID."""
        ...

    async def get_all(self) -> list[Profile]:
        """Get all profiles."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Update an existing profile."""
        ...
