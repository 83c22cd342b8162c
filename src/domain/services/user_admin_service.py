"""User administration over member profiles."""

from datetime import datetime
from typing import Callable, List, Optional
from uuid import UUID

import structlog

from core.exceptions import ProfileNotFoundError
from domain.entities.profile import Profile
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.validation import (
    optional_pin,
    optional_text,
    require_email,
    require_text,
)

logger = structlog.get_logger()


class UserAdminService:
    """Service layer for listing and editing member profiles."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        now: Callable[[], datetime] = datetime.utcnow,
    ) -> None:
        self._uow_factory = uow_factory
        self._now = now

    async def get_all(self) -> List[Profile]:
        """Get every member profile."""
        async with self._uow_factory() as uow:
            return await uow.profiles.get_all()  # type: ignore[no-any-return]

    async def update(
        self,
        user_id: UUID,
        name: Optional[str],
        email: Optional[str],
        avatar_url: Optional[str] = None,
        pin: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Profile:
        """Update a profile.

        Name and email are required; the PIN, when given, must be 4-6 digits.
        Blank optional fields are cleared.
        """
        name = require_text(name, "name")
        email = require_email(email)
        pin = optional_pin(pin)

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(user_id)
            if not profile:
                raise ProfileNotFoundError(str(user_id))

            profile.name = name
            profile.email = email
            profile.avatar_url = optional_text(avatar_url)
            profile.pin = pin
            profile.description = optional_text(description)
            profile.updated_at = self._now()

            updated = await uow.profiles.update(profile)
            await uow.commit()

        logger.info("profile_updated_by_admin", user_id=str(user_id))
        return updated
