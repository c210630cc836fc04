"""Notification repository protocol."""

from typing import Protocol

from domain.entities.notification import Notification


class INotificationRepository(Protocol):
    """Repository interface for the notification collection."""

    async def get_all(self) -> list[Notification]:
        """Get all notifications in insertion order."""
        ...

    async def save_all(self, notifications: list[Notification]) -> None:
        """Replace the stored collection with ``notifications``."""
        ...
