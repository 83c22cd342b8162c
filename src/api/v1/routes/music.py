"""Music catalogue API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_music_service
from api.v1.schemas.music import (
    MusicDetailResponse,
    MusicListResponse,
    MusicResponse,
    MusicWrite,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.music_service import MusicService

router = APIRouter(prefix="/music", tags=["music"])


@router.get("", response_model=MusicListResponse, summary="List tracks")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_music(
    request: Request,
    user: CurrentUser,
    service: MusicService = Depends(get_music_service),
) -> MusicListResponse:
    tracks = await service.get_all()
    return MusicListResponse(data=[MusicResponse.model_validate(t) for t in tracks])


@router.post(
    "",
    response_model=MusicDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a track",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_music(
    request: Request,
    body: MusicWrite,
    user: CurrentUser,
    service: MusicService = Depends(get_music_service),
) -> MusicDetailResponse:
    track = await service.create(**body.model_dump())
    return MusicDetailResponse(data=MusicResponse.model_validate(track))


@router.put(
    "/{music_id}",
    response_model=MusicDetailResponse,
    summary="Replace a track",
    responses={404: {"description": "Track not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_music(
    request: Request,
    music_id: int,
    body: MusicWrite,
    user: CurrentUser,
    service: MusicService = Depends(get_music_service),
) -> MusicDetailResponse:
    track = await service.update(music_id, **body.model_dump())
    return MusicDetailResponse(data=MusicResponse.model_validate(track))


@router.delete(
    "/{music_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a track",
    responses={404: {"description": "Track not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_music(
    request: Request,
    music_id: int,
    user: CurrentUser,
    service: MusicService = Depends(get_music_service),
) -> None:
    await service.delete(music_id)
    return None
