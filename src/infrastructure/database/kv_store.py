"""Key-value storage on top of a SQLAlchemy session."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.models import StorageEntryModel


class SQLAlchemyKeyValueStore:
    """String values stored under string keys in ``storage_entries``.

    Writes are flushed into the session's transaction; the unit of work
    decides when they are committed.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_item(self, key: str) -> str | None:
        stmt = select(StorageEntryModel.value).where(StorageEntryModel.key == key)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def set_item(self, key: str, value: str) -> None:
        model = await self._session.get(StorageEntryModel, key)
        if model is None:
            self._session.add(StorageEntryModel(key=key, value=value))
        else:
            model.value = value
        await self._session.flush()

    async def remove_item(self, key: str) -> None:
        stmt = delete(StorageEntryModel).where(StorageEntryModel.key == key)
        await self._session.execute(stmt)
