"""Pydantic schemas for user administration."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserUpdate(BaseModel):
    """Schema for editing a member profile.

    Format checks (email, PIN) happen in the service so that they share
    error codes with the rest of the API.
    """

    name: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=255)
    avatar_url: str | None = Field(None, max_length=500)
    pin: str | None = Field(None, max_length=20)
    description: str | None = None


class UserResponse(BaseModel):
    """Schema for a member profile."""

    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    name: str | None = None
    email: str
    avatar_url: str | None = None
    pin: str | None = None
    description: str | None = None
    created_at: datetime
    updated_at: datetime


class UserListResponse(BaseModel):
    data: list[UserResponse]


class UserDetailResponse(BaseModel):
    data: UserResponse
