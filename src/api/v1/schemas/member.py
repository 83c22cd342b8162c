"""Pydantic schemas for the member area and profile completion."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.owner_info import OwnerInfoSummary
from domain.services.profile_gate import GateState


class MemberOverviewResponse(BaseModel):
    """Header shown to a signed-in member."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Ana",
                "avatar_url": "https://i.ibb.co/d0mWy0kP/perfildef.png",
                "greeting": "Buenas tardes",
                "profile_state": "complete",
            }
        },
    )

    user_id: UUID
    name: str | None = None
    avatar_url: str
    greeting: str
    profile_state: GateState


class MemberOverviewDetailResponse(BaseModel):
    data: MemberOverviewResponse


class OwnerInfoCreate(BaseModel):
    """Personal information submitted once by a member.

    Fields are validated by the profile gate so that blank or malformed
    values produce domain errors rather than schema errors.
    """

    full_name: str | None = Field(None, max_length=200)
    birth_date: str | None = Field(None, max_length=40, examples=["2001-05-01"])
    nationality: str | None = Field(None, max_length=100)


class OwnerInfoResponse(BaseModel):
    """Read-only view of a member's personal information."""

    owner_id: UUID
    full_name: str
    birth_date: date | None = None
    birth_date_display: str
    age: int | None = None
    nationality: str
    created_at: datetime

    @classmethod
    def from_summary(cls, summary: OwnerInfoSummary) -> "OwnerInfoResponse":
        info = summary.owner_info
        return cls(
            owner_id=info.owner_id,
            full_name=info.full_name,
            birth_date=info.birth_date,
            birth_date_display=summary.birth_date_display,
            age=summary.age,
            nationality=info.nationality,
            created_at=info.created_at,
        )


class ProfileCompletionResponse(BaseModel):
    """Gate outcome: either the stored info or a request to complete it."""

    state: GateState
    owner_info: OwnerInfoResponse | None = None


class ProfileCompletionDetailResponse(BaseModel):
    data: ProfileCompletionResponse
