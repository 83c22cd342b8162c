"""Member area API routes: greeting header and personal information."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_member_service, get_profile_gate
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.member import (
    MemberOverviewDetailResponse,
    MemberOverviewResponse,
    OwnerInfoCreate,
    OwnerInfoResponse,
    ProfileCompletionDetailResponse,
    ProfileCompletionResponse,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.member_service import MemberService
from domain.services.profile_gate import GateState, ProfileGate

router = APIRouter(prefix="/me", tags=["me"])


async def _load_gate(gate: ProfileGate) -> GateState:
    """Load the gate, surfacing the recorded error when it fails."""
    state = await gate.load()
    if state == GateState.ERROR and gate.last_error is not None:
        raise gate.last_error
    return state


def _completion_body(gate: ProfileGate, service: MemberService) -> ProfileCompletionDetailResponse:
    owner_info = None
    if gate.record is not None:
        owner_info = OwnerInfoResponse.from_summary(service.summarize(gate.record))
    return ProfileCompletionDetailResponse(
        data=ProfileCompletionResponse(state=gate.state, owner_info=owner_info)
    )


@router.get(
    "",
    response_model=MemberOverviewDetailResponse,
    summary="Member area header",
    responses={404: {"model": ErrorResponse, "description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_me(
    request: Request,
    user: CurrentUser,
    service: MemberService = Depends(get_member_service),
    gate: ProfileGate = Depends(get_profile_gate),
) -> MemberOverviewDetailResponse:
    """Greeting for the current time of day, display name and avatar.

    ``profile_state`` tells the client whether personal information still
    has to be completed before the rest of the site is shown.
    """
    overview = await service.get_overview(user.id)
    state = await _load_gate(gate)
    return MemberOverviewDetailResponse(
        data=MemberOverviewResponse(
            user_id=overview.user_id,
            name=overview.name,
            avatar_url=overview.avatar_url,
            greeting=overview.greeting,
            profile_state=state,
        )
    )


@router.get(
    "/owner-info",
    response_model=ProfileCompletionDetailResponse,
    summary="Get personal information",
    responses={503: {"model": ErrorResponse, "description": "Store unavailable"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_owner_info(
    request: Request,
    user: CurrentUser,
    gate: ProfileGate = Depends(get_profile_gate),
    service: MemberService = Depends(get_member_service),
) -> ProfileCompletionDetailResponse:
    """Personal information of the member, or ``needs_completion``.

    Once stored, the information is read-only; the age is recomputed on
    every request.
    """
    await _load_gate(gate)
    return _completion_body(gate, service)


@router.post(
    "/owner-info",
    response_model=ProfileCompletionDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Complete personal information",
    responses={
        201: {"description": "Personal information stored"},
        400: {"model": ErrorResponse, "description": "Missing field or invalid date"},
        403: {"model": ErrorResponse, "description": "Member is below the minimum age"},
        409: {"model": ErrorResponse, "description": "Already completed"},
        503: {"model": ErrorResponse, "description": "Store unavailable"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def complete_owner_info(
    request: Request,
    body: OwnerInfoCreate,
    user: CurrentUser,
    gate: ProfileGate = Depends(get_profile_gate),
    service: MemberService = Depends(get_member_service),
) -> ProfileCompletionDetailResponse:
    """Submit name, birth date and nationality. Accepted only once."""
    await _load_gate(gate)
    await gate.submit_completion(
        full_name=body.full_name,
        birth_date=body.birth_date,
        nationality=body.nationality,
    )
    return _completion_body(gate, service)
