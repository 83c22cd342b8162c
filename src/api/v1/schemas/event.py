"""Pydantic schemas for Event API."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class EventCreate(BaseModel):
    """Schema for creating an Event."""

    name: str = Field(..., max_length=200)
    date: date
    description: str | None = None
    winner: str | None = Field(None, max_length=200)
    cover: str | None = Field(None, max_length=500)


class EventWinnerUpdate(BaseModel):
    """Schema for recording an Event's winner."""

    winner: str = Field(..., max_length=200)


class EventResponse(BaseModel):
    """Schema for Event response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 12,
                "name": "Torneo de invierno",
                "date": "2025-07-20",
                "description": "Final en vivo",
                "winner": None,
                "cover": "https://images.encantia.lat/eventos/invierno.webp",
            }
        },
    )

    id: int
    name: str
    date: date
    description: str | None = None
    winner: str | None = None
    cover: str | None = None


class EventListResponse(BaseModel):
    data: list[EventResponse]


class EventDetailResponse(BaseModel):
    data: EventResponse
