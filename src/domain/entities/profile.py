"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass
class Profile:
    """Domain entity for a member profile (row of Supabase ``profiles``)."""

    user_id: UUID
    email: str = ""
    name: str | None = None
    avatar_url: str | None = None
    pin: str | None = None
    description: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at


@dataclass(frozen=True, slots=True)
class MemberOverview:
    """Read-only value object backing the member area header."""

    user_id: UUID
    name: str | None
    avatar_url: str
    greeting: str
