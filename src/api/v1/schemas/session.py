"""Pydantic schemas for Session API."""

from pydantic import BaseModel, Field

from api.v1.schemas.profile import ProfileResponse


class SessionUpdate(BaseModel):
    """Schema for switching the session's current user."""

    profile_id: str = Field(..., min_length=1)


class SessionResponse(BaseModel):
    """The session's current user, or null when logged out."""

    profile: ProfileResponse | None = None
