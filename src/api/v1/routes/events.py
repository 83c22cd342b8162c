"""Event management API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_event_service
from api.v1.schemas.event import (
    EventCreate,
    EventDetailResponse,
    EventListResponse,
    EventResponse,
    EventWinnerUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.event_service import EventService

router = APIRouter(prefix="/events", tags=["events"])


@router.get(
    "",
    response_model=EventListResponse,
    summary="List events",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_events(
    request: Request,
    user: CurrentUser,
    service: EventService = Depends(get_event_service),
) -> EventListResponse:
    """All events, most recent date first."""
    events = await service.get_all()
    return EventListResponse(data=[EventResponse.model_validate(e) for e in events])


@router.post(
    "",
    response_model=EventDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an event",
    responses={
        201: {"description": "Event created successfully"},
        400: {"description": "Name is blank"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_event(
    request: Request,
    body: EventCreate,
    user: CurrentUser,
    service: EventService = Depends(get_event_service),
) -> EventDetailResponse:
    """Create a new event. Name and date are required."""
    event = await service.create(
        name=body.name,
        event_date=body.date,
        description=body.description,
        winner=body.winner,
        cover=body.cover,
    )
    return EventDetailResponse(data=EventResponse.model_validate(event))


@router.put(
    "/{event_id}/winner",
    response_model=EventDetailResponse,
    summary="Set the winner of an event",
    responses={
        200: {"description": "Winner saved"},
        404: {"description": "Event not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def set_event_winner(
    request: Request,
    event_id: int,
    body: EventWinnerUpdate,
    user: CurrentUser,
    service: EventService = Depends(get_event_service),
) -> EventDetailResponse:
    event = await service.set_winner(event_id, body.winner)
    return EventDetailResponse(data=EventResponse.model_validate(event))


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an event",
    responses={
        204: {"description": "Event deleted successfully"},
        404: {"description": "Event not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_event(
    request: Request,
    event_id: int,
    user: CurrentUser,
    service: EventService = Depends(get_event_service),
) -> None:
    await service.delete(event_id)
    return None
