"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from domain.entities.profile import UserProfile
from domain.entities.session import UserSession


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing.

    Collection reads start out empty; tests assign ``return_value`` to seed
    them and inspect ``save_all`` calls to see what was written.
    """

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.profiles.get_all.return_value = []
        self.notifications = AsyncMock()
        self.notifications.get_all.return_value = []
        self.current_user = AsyncMock()
        self.current_user.get.return_value = None
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def session() -> UserSession:
    """The default session."""
    return UserSession()


@pytest.fixture
def alice() -> UserProfile:
    return UserProfile(id="alice", name="Alice", email="alice@example.com")


@pytest.fixture
def bob() -> UserProfile:
    return UserProfile(id="bob", name="Bob", email="bob@example.com")
