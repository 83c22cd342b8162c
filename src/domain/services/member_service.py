"""Member area service: greeting header and personal information view."""

from datetime import datetime
from typing import Callable
from uuid import UUID

from core.config import settings
from core.exceptions import ProfileNotFoundError
from domain.entities.owner_info import OwnerInfo, OwnerInfoSummary
from domain.entities.profile import MemberOverview
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.dates import (
    age_in_years,
    format_display_date,
    greeting_for_hour,
    local_now,
)


class MemberService:
    """Service layer for what a signed-in member sees about themselves."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        now: Callable[[], datetime] = local_now,
        default_avatar_url: str = settings.default_avatar_url,
    ) -> None:
        self._uow_factory = uow_factory
        self._now = now
        self._default_avatar_url = default_avatar_url

    async def get_overview(self, user_id: UUID) -> MemberOverview:
        """Greeting, display name and avatar for the member area."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(user_id)
            if not profile:
                raise ProfileNotFoundError(str(user_id))

        return MemberOverview(
            user_id=user_id,
            name=profile.name,
            avatar_url=profile.avatar_url or self._default_avatar_url,
            greeting=greeting_for_hour(self._now().hour),
        )

    def summarize(self, owner_info: OwnerInfo) -> OwnerInfoSummary:
        """Attach the age (recomputed on every call) and display date."""
        age = age_in_years(owner_info.birth_date, self._now())
        if age is None:
            age = owner_info.stored_age
        return OwnerInfoSummary(
            owner_info=owner_info,
            age=age,
            birth_date_display=format_display_date(owner_info.birth_date),
        )
