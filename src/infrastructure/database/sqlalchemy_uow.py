"""SQLAlchemy Unit of Work implementation."""

import asyncio
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.config import Settings, settings
from infrastructure.database.kv_store import SQLAlchemyKeyValueStore
from infrastructure.database.repositories.kv_current_user_repo import (
    KeyValueCurrentUserRepository,
)
from infrastructure.database.repositories.kv_notification_repo import (
    KeyValueNotificationRepository,
)
from infrastructure.database.repositories.kv_profile_repo import KeyValueProfileRepository


class SQLAlchemyUnitOfWork:
    """Unit of Work implementation using SQLAlchemy.

    The shared ``lock`` is held from ``__aenter__`` to ``__aexit__`` so that
    each read-modify-write cycle runs alone against the storage. Units of
    work must not be nested on the same lock.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        lock: asyncio.Lock,
        config: Settings = settings,
    ) -> None:
        self._session_factory = session_factory
        self._lock = lock
        self._config = config
        self._session: Optional[AsyncSession] = None
        self._store: Optional[SQLAlchemyKeyValueStore] = None

    def _require_store(self) -> SQLAlchemyKeyValueStore:
        if not self._store:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._store

    @property
    def profiles(self) -> KeyValueProfileRepository:
        """Get profile repository."""
        return KeyValueProfileRepository(self._require_store(), self._config.profiles_key)

    @property
    def notifications(self) -> KeyValueNotificationRepository:
        """Get notification repository."""
        return KeyValueNotificationRepository(
            self._require_store(), self._config.notifications_key
        )

    @property
    def current_user(self) -> KeyValueCurrentUserRepository:
        """Get current-user pointer repository."""
        return KeyValueCurrentUserRepository(
            self._require_store(), self._config.current_user_key
        )

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Take the storage lock and create session."""
        await self._lock.acquire()
        try:
            self._session = self._session_factory()
        except BaseException:
            self._lock.release()
            raise
        self._store = SQLAlchemyKeyValueStore(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager, cleanup and release the lock."""
        try:
            if self._session:
                if exc_type:
                    await self.rollback()
                await self._session.close()
        finally:
            self._session = None
            self._store = None
            self._lock.release()
