"""Pydantic schemas for Profile API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _normalize_skills(skills: list[str]) -> list[str]:
    """Trim skills, dropping blanks and repeats while keeping order."""
    seen: list[str] = []
    for skill in skills:
        trimmed = skill.strip()
        if trimmed and trimmed not in seen:
            seen.append(trimmed)
    return seen


class ProfileCreate(BaseModel):
    """Schema for the profile creation form."""

    name: str
    email: str
    password: str
    confirm_password: str
    bio: str = ""
    image_url: str = ""
    skills: list[str] = Field(default_factory=list)
    is_private: bool = False

    @field_validator("skills")
    @classmethod
    def normalize_skills(cls, v: list[str]) -> list[str]:
        return _normalize_skills(v)


class ProfileUpdate(BaseModel):
    """Schema for the profile edit form. Omitted fields are left unchanged."""

    name: str | None = None
    email: str | None = None
    bio: str | None = None
    image_url: str | None = None
    skills: list[str] | None = None
    is_private: bool | None = None

    @field_validator("skills")
    @classmethod
    def normalize_skills(cls, v: list[str] | None) -> list[str] | None:
        return None if v is None else _normalize_skills(v)


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "k3j9x0a1b2c",
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "bio": "Analytical engines enthusiast",
                "image_url": "",
                "skills": ["Mathematics", "Programming"],
                "is_private": False,
                "following": [],
                "followers": ["p0q9r8s7t6u"],
                "created_at": "2026-01-28T10:00:00Z",
                "updated_at": "2026-01-28T10:00:00Z",
                "view_count": 12,
            }
        },
    )

    id: str
    name: str
    email: str
    bio: str
    image_url: str
    skills: list[str]
    is_private: bool
    following: list[str]
    followers: list[str]
    created_at: datetime
    updated_at: datetime
    view_count: int


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles."""

    data: list[ProfileResponse]


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse


class FollowStatusResponse(BaseModel):
    """Whether the session's current user follows a profile."""

    following: bool


class ProfileStatsResponse(BaseModel):
    """Audience numbers for one profile."""

    model_config = ConfigDict(from_attributes=True)

    profile_id: str
    view_count: int
    follower_count: int
    following_count: int
