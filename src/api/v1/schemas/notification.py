"""Pydantic schemas for Notification API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.notification import NotificationType


class NotificationCreate(BaseModel):
    """Schema for posting a system message to a profile."""

    user_id: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1, max_length=500)


class NotificationResponse(BaseModel):
    """Single notification in the feed."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    message: str
    type: NotificationType
    read: bool
    created_at: datetime


class NotificationListResponse(BaseModel):
    """Notification feed response."""

    data: list[NotificationResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class NotificationDetailResponse(BaseModel):
    """Schema for single Notification."""

    data: NotificationResponse


class UnreadCountResponse(BaseModel):
    """Unread notification count response."""

    count: int


class MarkAllReadResponse(BaseModel):
    """Response for mark-all-read operation."""

    count: int  # Number of notifications marked
