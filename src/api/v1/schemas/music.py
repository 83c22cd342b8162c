"""Pydantic schemas for Music API."""

from pydantic import BaseModel, ConfigDict, Field


class MusicWrite(BaseModel):
    """Schema for creating or replacing a track."""

    title: str = Field(..., max_length=300)
    author: str | None = Field(None, max_length=200)
    category: str | None = Field(None, max_length=100)
    music_url: str | None = Field(None, max_length=500)
    cover_url: str | None = Field(None, max_length=500)


class MusicResponse(BaseModel):
    """Schema for Music response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str | None = None
    category: str | None = None
    music_url: str | None = None
    cover_url: str | None = None


class MusicListResponse(BaseModel):
    data: list[MusicResponse]


class MusicDetailResponse(BaseModel):
    data: MusicResponse
