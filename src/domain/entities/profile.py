"""Profile domain entities."""

from dataclasses import dataclass, field
from datetime import datetime

from domain.entities.common import generate_id, utcnow


@dataclass
class UserProfile:
    """Domain entity for a user profile."""

    name: str
    email: str
    id: str = field(default_factory=generate_id)
    bio: str = ""
    image_url: str = ""
    skills: list[str] = field(default_factory=list)
    is_private: bool = False
    following: list[str] = field(default_factory=list)
    followers: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    view_count: int = 0

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    def is_owned_by(self, profile_id: str | None) -> bool:
        return profile_id is not None and self.id == profile_id


@dataclass
class NewProfile:
    """Caller-supplied fields for a profile about to be created."""

    name: str
    email: str
    bio: str = ""
    image_url: str = ""
    skills: list[str] = field(default_factory=list)
    is_private: bool = False
    following: list[str] = field(default_factory=list)


@dataclass
class ProfilePatch:
    """Partial profile update.

    A field left as ``None`` is absent from the patch and keeps its stored
    value; any other value overwrites it.
    """

    id: str
    name: str | None = None
    email: str | None = None
    bio: str | None = None
    image_url: str | None = None
    skills: list[str] | None = None
    is_private: bool | None = None

    def apply(self, profile: UserProfile, now: datetime) -> UserProfile:
        """Merge the present fields over ``profile`` in place and return it."""
        if self.name is not None:
            profile.name = self.name
        if self.email is not None:
            profile.email = self.email
        if self.bio is not None:
            profile.bio = self.bio
        if self.image_url is not None:
            profile.image_url = self.image_url
        if self.skills is not None:
            profile.skills = list(self.skills)
        if self.is_private is not None:
            profile.is_private = self.is_private
        profile.updated_at = now
        return profile


@dataclass(frozen=True, slots=True)
class ProfileStats:
    """Read-only value object: audience numbers for one profile."""

    profile_id: str
    view_count: int
    follower_count: int
    following_count: int
