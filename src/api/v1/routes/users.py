"""User administration API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_user_admin_service
from api.v1.schemas.user import (
    UserDetailResponse,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.user_admin_service import UserAdminService

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "",
    response_model=UserListResponse,
    summary="List member profiles",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_users(
    request: Request,
    user: CurrentUser,
    service: UserAdminService = Depends(get_user_admin_service),
) -> UserListResponse:
    profiles = await service.get_all()
    return UserListResponse(data=[UserResponse.model_validate(p) for p in profiles])


@router.put(
    "/{user_id}",
    response_model=UserDetailResponse,
    summary="Edit a member profile",
    responses={
        200: {"description": "Profile updated"},
        400: {"description": "Missing name, invalid email or invalid PIN"},
        404: {"description": "Profile not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_user(
    request: Request,
    user_id: UUID,
    body: UserUpdate,
    user: CurrentUser,
    service: UserAdminService = Depends(get_user_admin_service),
) -> UserDetailResponse:
    """Replace a member's name, email, avatar, PIN and description."""
    profile = await service.update(
        user_id=user_id,
        name=body.name,
        email=body.email,
        avatar_url=body.avatar_url,
        pin=body.pin,
        description=body.description,
    )
    return UserDetailResponse(data=UserResponse.model_validate(profile))
