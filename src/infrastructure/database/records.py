"""Serialized shapes of the stored JSON blobs.

The blobs use camelCase keys (``imageUrl``, ``isPrivate``, ``createdAt``,
...). Missing fields fall back to defaults so partially written records
still load.
"""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

from domain.entities.common import utcnow
from domain.entities.notification import Notification, NotificationType
from domain.entities.profile import UserProfile


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("created_at", "updated_at", check_fields=False)
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Naive timestamps were written as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class ProfileRecord(_Record):
    """Stored form of a UserProfile."""

    id: str
    name: str = ""
    email: str = ""
    bio: str = ""
    image_url: str = ""
    skills: list[str] = Field(default_factory=list)
    is_private: bool = False
    following: list[str] = Field(default_factory=list)
    followers: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    view_count: int = 0

    @classmethod
    def from_entity(cls, profile: UserProfile) -> "ProfileRecord":
        return cls(
            id=profile.id,
            name=profile.name,
            email=profile.email,
            bio=profile.bio,
            image_url=profile.image_url,
            skills=profile.skills,
            is_private=profile.is_private,
            following=profile.following,
            followers=profile.followers,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
            view_count=profile.view_count,
        )

    def to_entity(self) -> UserProfile:
        return UserProfile(
            id=self.id,
            name=self.name,
            email=self.email,
            bio=self.bio,
            image_url=self.image_url,
            skills=list(self.skills),
            is_private=self.is_private,
            following=list(self.following),
            followers=list(self.followers),
            created_at=self.created_at,
            updated_at=self.updated_at,
            view_count=self.view_count,
        )


class NotificationRecord(_Record):
    """Stored form of a Notification."""

    id: str
    user_id: str
    message: str = ""
    type: NotificationType = NotificationType.SYSTEM
    read: bool = False
    created_at: datetime = Field(default_factory=utcnow)

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationRecord":
        return cls(
            id=notification.id,
            user_id=notification.user_id,
            message=notification.message,
            type=notification.type,
            read=notification.read,
            created_at=notification.created_at,
        )

    def to_entity(self) -> Notification:
        return Notification(
            id=self.id,
            user_id=self.user_id,
            message=self.message,
            type=self.type,
            read=self.read,
            created_at=self.created_at,
        )


profile_list_adapter = TypeAdapter(list[ProfileRecord])
notification_list_adapter = TypeAdapter(list[NotificationRecord])
current_user_adapter = TypeAdapter(str)
