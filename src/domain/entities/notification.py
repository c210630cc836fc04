"""Notification domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from domain.entities.common import generate_id, utcnow


class NotificationType(StrEnum):
    """Kind of notification; only decides how a client renders it."""

    FOLLOW = "follow"
    VIEW = "view"
    SYSTEM = "system"


@dataclass
class Notification:
    """Domain entity for a notification addressed to one profile."""

    user_id: str
    message: str
    type: NotificationType
    id: str = field(default_factory=generate_id)
    read: bool = False
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class NewNotification:
    """Caller-supplied fields for a notification about to be added."""

    user_id: str
    message: str
    type: NotificationType = NotificationType.SYSTEM
    read: bool = False
    created_at: datetime | None = None
