"""Owner info domain entity."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID


@dataclass
class OwnerInfo:
    """Personal information a member provides once, after signing up.

    Keyed by the member's identity; there is at most one record per owner
    and it is never edited by the owner afterwards.
    """

    owner_id: UUID
    full_name: str
    birth_date: date | None  # None only on legacy rows
    nationality: str
    stored_age: int | None = None  # legacy ``edad`` column
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True, slots=True)
class OwnerInfoSummary:
    """Read-only value object: an OwnerInfo with its derived display fields."""

    owner_info: OwnerInfo
    age: int | None
    birth_date_display: str
