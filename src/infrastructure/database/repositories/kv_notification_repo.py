"""Key-value storage implementation of the Notification repository."""

from domain.entities.notification import Notification
from infrastructure.database.kv_store import SQLAlchemyKeyValueStore
from infrastructure.database.records import NotificationRecord, notification_list_adapter


class KeyValueNotificationRepository:
    """INotificationRepository storing the whole collection as one JSON array."""

    def __init__(self, store: SQLAlchemyKeyValueStore, key: str) -> None:
        self._store = store
        self._key = key

    async def get_all(self) -> list[Notification]:
        raw = await self._store.get_item(self._key)
        if not raw:
            return []
        return [record.to_entity() for record in notification_list_adapter.validate_json(raw)]

    async def save_all(self, notifications: list[Notification]) -> None:
        records = [NotificationRecord.from_entity(n) for n in notifications]
        raw = notification_list_adapter.dump_json(records, by_alias=True).decode()
        await self._store.set_item(self._key, raw)
