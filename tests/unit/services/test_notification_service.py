"""Unit tests for NotificationService."""

from datetime import timedelta

import pytest

from domain.entities.common import utcnow
from domain.entities.notification import NewNotification, Notification, NotificationType
from domain.services.notification_service import NotificationService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> NotificationService:
    return NotificationService(lambda: uow)


def _notification(user_id: str, read: bool = False, minutes_ago: int = 0, **kwargs) -> Notification:
    return Notification(
        user_id=user_id,
        message=kwargs.pop("message", "m"),
        type=kwargs.pop("type", NotificationType.SYSTEM),
        read=read,
        created_at=utcnow() - timedelta(minutes=minutes_ago),
        **kwargs,
    )


# --- notify (in-transaction) ---


class TestNotify:
    @pytest.mark.asyncio
    async def test_appends_without_committing(self, service: NotificationService, uow: FakeUnitOfWork):
        existing = _notification("u1")
        uow.notifications.get_all.return_value = [existing]

        created = await service.notify(uow, "u2", "hello", NotificationType.FOLLOW)

        saved = uow.notifications.save_all.call_args.args[0]
        assert saved == [existing, created]
        assert created.read is False
        assert not uow.committed


# --- add_notification ---


class TestAddNotification:
    @pytest.mark.asyncio
    async def test_assigns_id_and_persists(self, service: NotificationService, uow: FakeUnitOfWork):
        result = await service.add_notification(
            NewNotification(user_id="u1", message="m", type=NotificationType.SYSTEM)
        )

        assert result.id
        assert result.user_id == "u1"
        assert result.read is False
        uow.notifications.save_all.assert_called_once_with([result])
        assert uow.committed

    @pytest.mark.asyncio
    async def test_keeps_supplied_timestamp(self, service: NotificationService):
        created_at = utcnow() - timedelta(days=2)

        result = await service.add_notification(
            NewNotification(user_id="u1", message="m", created_at=created_at)
        )

        assert result.created_at == created_at


# --- get_notifications ---


class TestGetNotifications:
    @pytest.mark.asyncio
    async def test_filters_by_user_newest_first(
        self, service: NotificationService, uow: FakeUnitOfWork
    ):
        old = _notification("u1", minutes_ago=10, message="old")
        other = _notification("u2", minutes_ago=5)
        new = _notification("u1", minutes_ago=1, message="new")
        uow.notifications.get_all.return_value = [old, other, new]

        result = await service.get_notifications("u1")

        assert [n.message for n in result] == ["new", "old"]

    @pytest.mark.asyncio
    async def test_ties_keep_insertion_order(
        self, service: NotificationService, uow: FakeUnitOfWork
    ):
        stamp = utcnow()
        first = Notification(user_id="u1", message="first", type=NotificationType.VIEW, created_at=stamp)
        second = Notification(user_id="u1", message="second", type=NotificationType.VIEW, created_at=stamp)
        uow.notifications.get_all.return_value = [first, second]

        result = await service.get_notifications("u1")

        assert [n.message for n in result] == ["first", "second"]


# --- read state ---


class TestReadState:
    @pytest.mark.asyncio
    async def test_unread_count(self, service: NotificationService, uow: FakeUnitOfWork):
        uow.notifications.get_all.return_value = [
            _notification("1"),
            _notification("1"),
            _notification("1", read=True),
            _notification("2"),
        ]

        assert await service.get_unread_count("1") == 2

    @pytest.mark.asyncio
    async def test_mark_read(self, service: NotificationService, uow: FakeUnitOfWork):
        target = _notification("u1")
        uow.notifications.get_all.return_value = [target]

        await service.mark_read(target.id)

        assert target.read is True
        assert uow.committed

    @pytest.mark.asyncio
    async def test_mark_read_unknown_id_is_a_no_op(
        self, service: NotificationService, uow: FakeUnitOfWork
    ):
        uow.notifications.get_all.return_value = [_notification("u1")]

        await service.mark_read("missing")

        uow.notifications.save_all.assert_not_called()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_mark_all_read_only_touches_that_user(
        self, service: NotificationService, uow: FakeUnitOfWork
    ):
        mine = [_notification("1"), _notification("1"), _notification("1", read=True)]
        theirs = _notification("2")
        uow.notifications.get_all.return_value = [*mine, theirs]

        count = await service.mark_all_read("1")

        assert count == 2
        assert all(n.read for n in mine)
        assert theirs.read is False
        assert uow.committed
