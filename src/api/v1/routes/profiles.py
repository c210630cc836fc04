"""Profile API routes."""

from fastapi import APIRouter, Depends, Query, Request, status

from api.v1.dependencies import CurrentSession, LoggedInUser, get_profile_service
from api.v1.schemas.profile import (
    FollowStatusResponse,
    ProfileCreate,
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileResponse,
    ProfileStatsResponse,
    ProfileUpdate,
)
from core.config import settings
from core.exceptions import AuthorizationError, ProfileValidationError
from core.rate_limit import limiter
from domain.entities.profile import NewProfile, ProfilePatch, UserProfile
from domain.services.profile_service import ProfileService
from domain.services.validation import validate_profile_form

router = APIRouter(prefix="/profiles", tags=["profiles"])


def _require_owner(user: UserProfile, profile_id: str) -> None:
    if user.id != profile_id:
        raise AuthorizationError("You can only change your own profile")


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="List or search profiles",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    q: str | None = Query(None, description="Search name, email and skills"),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """List every profile, or only those matching ``q`` when given."""
    if q is not None:
        profiles = await service.search_profiles(q)
    else:
        profiles = await service.get_profiles()
    return ProfileListResponse(data=[ProfileResponse.model_validate(p) for p in profiles])


@router.post(
    "",
    response_model=ProfileDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
    responses={
        201: {"description": "Profile created and set as the session's current user"},
        400: {"description": "Form validation failed"},
        409: {"description": "Email already exists"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def create_profile(
    request: Request,
    body: ProfileCreate,
    session: CurrentSession,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Validate the form, create the profile and log the session in as it."""
    errors = validate_profile_form(
        name=body.name,
        email=body.email,
        bio=body.bio,
        password=body.password,
        confirm_password=body.confirm_password,
        bio_max_length=settings.bio_max_length,
    )
    if errors:
        raise ProfileValidationError(errors)

    profile = await service.create_profile(
        session,
        NewProfile(
            name=body.name,
            email=body.email,
            bio=body.bio,
            image_url=body.image_url,
            skills=body.skills,
            is_private=body.is_private,
        ),
    )
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.get(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile",
    responses={
        403: {"description": "Profile is private"},
        404: {"description": "Profile not found"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    profile_id: str,
    session: CurrentSession,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get a profile. Private profiles are only visible to their owner."""
    profile = await service.get_visible_profile(session, profile_id)
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.patch(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Update a profile",
    responses={
        400: {"description": "Form validation failed"},
        401: {"description": "Not logged in"},
        403: {"description": "Not the profile owner"},
        404: {"description": "Profile not found"},
        409: {"description": "Email already exists"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    profile_id: str,
    body: ProfileUpdate,
    user: LoggedInUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Update the session's own profile. Omitted fields keep their values."""
    _require_owner(user, profile_id)

    errors = validate_profile_form(
        name=body.name if body.name is not None else user.name,
        email=body.email if body.email is not None else user.email,
        bio=body.bio if body.bio is not None else user.bio,
        require_password=False,
        bio_max_length=settings.bio_max_length,
    )
    if errors:
        raise ProfileValidationError(errors)

    profile = await service.update_profile(
        ProfilePatch(id=profile_id, **body.model_dump(exclude_none=True))
    )
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.delete(
    "/{profile_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a profile",
    responses={
        204: {"description": "Profile deleted and session logged out"},
        401: {"description": "Not logged in"},
        403: {"description": "Not the profile owner"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_profile(
    request: Request,
    profile_id: str,
    session: CurrentSession,
    user: LoggedInUser,
    service: ProfileService = Depends(get_profile_service),
) -> None:
    """Delete the session's own profile."""
    _require_owner(user, profile_id)
    await service.delete_profile(session, profile_id)


@router.post(
    "/{profile_id}/views",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Record a profile view",
)
@limiter.limit("60/minute")  # type: ignore[untyped-decorator]
async def record_view(
    request: Request,
    profile_id: str,
    session: CurrentSession,
    service: ProfileService = Depends(get_profile_service),
) -> None:
    """Count a view of someone else's profile and notify its owner.

    Looking at your own profile is not counted.
    """
    viewer = await service.get_current_user(session)
    if viewer is not None and viewer.id == profile_id:
        return
    await service.view_profile(session, profile_id)


@router.get(
    "/{profile_id}/follow",
    response_model=FollowStatusResponse,
    summary="Check follow status",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_follow_status(
    request: Request,
    profile_id: str,
    session: CurrentSession,
    service: ProfileService = Depends(get_profile_service),
) -> FollowStatusResponse:
    """Whether the session's current user follows this profile."""
    return FollowStatusResponse(following=await service.is_following(session, profile_id))


@router.post(
    "/{profile_id}/follow",
    response_model=FollowStatusResponse,
    summary="Follow or unfollow a profile",
    responses={
        401: {"description": "Not logged in"},
        404: {"description": "Profile not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def toggle_follow(
    request: Request,
    profile_id: str,
    session: CurrentSession,
    service: ProfileService = Depends(get_profile_service),
) -> FollowStatusResponse:
    """Toggle following and return the new state."""
    return FollowStatusResponse(following=await service.toggle_follow(session, profile_id))


@router.get(
    "/{profile_id}/stats",
    response_model=ProfileStatsResponse,
    summary="Get profile analytics",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_profile_stats(
    request: Request,
    profile_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileStatsResponse:
    """Views, follower and following counts of a profile."""
    stats = await service.get_profile_stats(profile_id)
    return ProfileStatsResponse.model_validate(stats)
