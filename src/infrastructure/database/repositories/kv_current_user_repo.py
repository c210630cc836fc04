"""Key-value storage implementation of the current-user pointer repository."""

from domain.entities.session import UserSession
from infrastructure.database.kv_store import SQLAlchemyKeyValueStore
from infrastructure.database.records import current_user_adapter


class KeyValueCurrentUserRepository:
    """ICurrentUserRepository storing each pointer as a JSON string.

    The default session uses ``base_key`` itself; named sessions get
    ``"{base_key}:{session_id}"``.
    """

    def __init__(self, store: SQLAlchemyKeyValueStore, base_key: str) -> None:
        self._store = store
        self._base_key = base_key

    async def get(self, session: UserSession) -> str | None:
        raw = await self._store.get_item(session.pointer_key(self._base_key))
        if not raw:
            return None
        return current_user_adapter.validate_json(raw)

    async def set(self, session: UserSession, profile_id: str) -> None:
        raw = current_user_adapter.dump_json(profile_id).decode()
        await self._store.set_item(session.pointer_key(self._base_key), raw)

    async def clear(self, session: UserSession) -> None:
        await self._store.remove_item(session.pointer_key(self._base_key))
