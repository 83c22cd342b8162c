"""Pydantic schemas for Book API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class BookWrite(BaseModel):
    """Schema for creating or replacing a Book."""

    title: str = Field(..., max_length=300)
    description: str | None = None
    cover_url: str | None = Field(None, max_length=500)
    portada_url: str | None = Field(None, max_length=500)


class BookResponse(BaseModel):
    """Schema for Book response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    cover_url: str | None = None
    portada_url: str | None = None
    created_at: datetime


class BookListResponse(BaseModel):
    data: list[BookResponse]


class BookDetailResponse(BaseModel):
    data: BookResponse
