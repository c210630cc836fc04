"""Key-value storage implementation of the Profile repository."""

from domain.entities.profile import UserProfile
from infrastructure.database.kv_store import SQLAlchemyKeyValueStore
from infrastructure.database.records import ProfileRecord, profile_list_adapter


class KeyValueProfileRepository:
    """IProfileRepository storing the whole collection as one JSON array."""

    def __init__(self, store: SQLAlchemyKeyValueStore, key: str) -> None:
        self._store = store
        self._key = key

    async def get_all(self) -> list[UserProfile]:
        """Get all profiles, or an empty list if none were ever saved."""
        raw = await self._store.get_item(self._key)
        if not raw:
            return []
        return [record.to_entity() for record in profile_list_adapter.validate_json(raw)]

    async def save_all(self, profiles: list[UserProfile]) -> None:
        """Serialize and store the full collection."""
        records = [ProfileRecord.from_entity(p) for p in profiles]
        raw = profile_list_adapter.dump_json(records, by_alias=True).decode()
        await self._store.set_item(self._key, raw)
