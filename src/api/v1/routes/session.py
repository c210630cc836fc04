"""Session API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.v1.dependencies import CurrentSession, get_profile_service
from api.v1.schemas.profile import ProfileResponse
from api.v1.schemas.session import SessionResponse, SessionUpdate
from core.rate_limit import limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/session", tags=["session"])


@router.get(
    "",
    response_model=SessionResponse,
    summary="Get the current user",
)
@limiter.limit("60/minute")  # type: ignore[untyped-decorator]
async def get_session(
    request: Request,
    session: CurrentSession,
    service: ProfileService = Depends(get_profile_service),
) -> SessionResponse:
    """Return the session's current user, or null when logged out."""
    profile = await service.get_current_user(session)
    return SessionResponse(
        profile=ProfileResponse.model_validate(profile) if profile else None
    )


@router.put(
    "",
    response_model=SessionResponse,
    summary="Switch the current user",
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def set_session(
    request: Request,
    body: SessionUpdate,
    session: CurrentSession,
    service: ProfileService = Depends(get_profile_service),
) -> SessionResponse:
    """Point the session at a profile.

    The id is stored as given; an unknown id leaves the session logged out.
    """
    await service.set_current_user(session, body.profile_id)
    profile = await service.get_current_user(session)
    return SessionResponse(
        profile=ProfileResponse.model_validate(profile) if profile else None
    )


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Log out",
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def clear_session(
    request: Request,
    session: CurrentSession,
    service: ProfileService = Depends(get_profile_service),
) -> None:
    """Clear the session's current user."""
    await service.clear_current_user(session)
