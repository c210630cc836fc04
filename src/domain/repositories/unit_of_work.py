"""Unit of Work protocol."""

from typing import Protocol

from domain.repositories.current_user_repository import ICurrentUserRepository
from domain.repositories.notification_repository import INotificationRepository
from domain.repositories.profile_repository import IProfileRepository


class IUnitOfWork(Protocol):
    """Unit of Work interface for managing transactions.

    Entering the context starts one read-modify-write critical section;
    nothing is persisted until ``commit``.
    """

    profiles: IProfileRepository
    notifications: INotificationRepository
    current_user: ICurrentUserRepository

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
