"""Integration tests for the notification store over the key-value storage."""

import pytest

from domain.entities.notification import NewNotification, NotificationType
from domain.services.notification_service import NotificationService


class TestNotificationStore:
    @pytest.mark.asyncio
    async def test_add_then_list(self, notification_service: NotificationService):
        created = await notification_service.add_notification(
            NewNotification(user_id="u1", message="m", type=NotificationType.SYSTEM, read=False)
        )

        result = await notification_service.get_notifications("u1")

        assert created.id
        assert result == [created]

    @pytest.mark.asyncio
    async def test_unread_count_and_mark_all(self, notification_service: NotificationService):
        for read in (False, False, True):
            await notification_service.add_notification(
                NewNotification(user_id="1", message="m", read=read)
            )
        await notification_service.add_notification(NewNotification(user_id="2", message="m"))

        assert await notification_service.get_unread_count("1") == 2

        await notification_service.mark_all_read("1")

        assert await notification_service.get_unread_count("1") == 0
        assert await notification_service.get_unread_count("2") == 1

    @pytest.mark.asyncio
    async def test_mark_single_read(self, notification_service: NotificationService):
        first = await notification_service.add_notification(NewNotification(user_id="u1", message="a"))
        await notification_service.add_notification(NewNotification(user_id="u1", message="b"))

        await notification_service.mark_read(first.id)
        await notification_service.mark_read("missing")

        by_id = {n.id: n for n in await notification_service.get_notifications("u1")}
        assert by_id[first.id].read is True
        assert await notification_service.get_unread_count("u1") == 1

    @pytest.mark.asyncio
    async def test_empty_storage(self, notification_service: NotificationService):
        assert await notification_service.get_notifications("u1") == []
        assert await notification_service.get_unread_count("u1") == 0
        assert await notification_service.mark_all_read("u1") == 0
