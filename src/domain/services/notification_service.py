"""Notification service layer for creating and managing notifications."""

from collections.abc import Callable

import structlog

from domain.entities.common import utcnow
from domain.entities.notification import NewNotification, Notification, NotificationType
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class NotificationService:
    """Service layer for notification creation and management."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    # --- In-transaction notification creation ---

    async def notify(
        self,
        uow: IUnitOfWork,
        user_id: str,
        message: str,
        type: NotificationType,
    ) -> Notification:
        """Append a notification within an existing UoW transaction.

        Called from other services inside their own read-modify-write cycle
        so the notification is committed together with their changes.

        Args:
            uow: The active Unit of Work (caller manages commit).
            user_id: The recipient profile id.
            message: Pre-rendered, human-readable text.
            type: The notification type.

        Returns:
            The appended Notification.
        """
        notification = Notification(user_id=user_id, message=message, type=type)
        notifications = await uow.notifications.get_all()
        notifications.append(notification)
        await uow.notifications.save_all(notifications)

        logger.info(
            "notification_added",
            notification_id=notification.id,
            user_id=user_id,
            type=type.value,
        )
        return notification

    # --- Standalone operations (use own UoW context) ---

    async def add_notification(self, data: NewNotification) -> Notification:
        """Assign a fresh id to ``data``, append it and persist."""
        async with self._uow_factory() as uow:
            notification = Notification(
                user_id=data.user_id,
                message=data.message,
                type=data.type,
                read=data.read,
                created_at=data.created_at or utcnow(),
            )
            notifications = await uow.notifications.get_all()
            notifications.append(notification)
            await uow.notifications.save_all(notifications)
            await uow.commit()

        logger.info(
            "notification_added",
            notification_id=notification.id,
            user_id=notification.user_id,
            type=notification.type.value,
        )
        return notification

    async def get_notifications(self, user_id: str) -> list[Notification]:
        """Get a user's notifications, most recent first.

        Ties on ``created_at`` keep their insertion order.
        """
        async with self._uow_factory() as uow:
            notifications = await uow.notifications.get_all()

        own = [n for n in notifications if n.user_id == user_id]
        return sorted(own, key=lambda n: n.created_at, reverse=True)

    async def get_unread_count(self, user_id: str) -> int:
        """Get the count of unread notifications."""
        async with self._uow_factory() as uow:
            notifications = await uow.notifications.get_all()

        return sum(1 for n in notifications if n.user_id == user_id and not n.read)

    async def mark_read(self, notification_id: str) -> None:
        """Mark a notification as read. Unknown ids are ignored."""
        async with self._uow_factory() as uow:
            notifications = await uow.notifications.get_all()
            for notification in notifications:
                if notification.id == notification_id:
                    notification.read = True
                    await uow.notifications.save_all(notifications)
                    await uow.commit()
                    return

        logger.debug("notification_mark_read_skipped", notification_id=notification_id)

    async def mark_all_read(self, user_id: str) -> int:
        """Mark all of a user's notifications as read. Returns count of marked."""
        async with self._uow_factory() as uow:
            notifications = await uow.notifications.get_all()
            count = 0
            for notification in notifications:
                if notification.user_id == user_id and not notification.read:
                    notification.read = True
                    count += 1

            if count:
                await uow.notifications.save_all(notifications)
                await uow.commit()
            return count
