"""Pytest configuration and fixtures."""

import asyncio
import os
import sys
from collections.abc import AsyncGenerator, Callable
from pathlib import Path

# Disable rate limiting and keep the default engine off disk in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.services.notification_service import NotificationService
from domain.services.profile_service import ProfileService
from infrastructure.database.models import Base
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

# Test database URL (SQLite in memory, one shared connection)
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with the storage table."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def uow_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], SQLAlchemyUnitOfWork]:
    """Unit of work factory sharing one storage lock, like the app's."""
    lock = asyncio.Lock()

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory, lock)

    return factory


@pytest.fixture
def notification_service(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork],
) -> NotificationService:
    return NotificationService(uow_factory)


@pytest.fixture
def profile_service(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork],
    notification_service: NotificationService,
) -> ProfileService:
    return ProfileService(uow_factory, notification_service=notification_service)


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    profile_service: ProfileService,
    notification_service: NotificationService,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client wired to the in-memory storage.

    This client:
    - Uses an in-memory SQLite database
    - Overrides the service factories to use the test unit of work
    - Overrides the health check session
    """
    from api.v1.dependencies import get_notification_service, get_profile_service
    from infrastructure.database.session import get_async_session
    from main import create_app

    app = create_app()

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_profile_service] = lambda: profile_service
    app.dependency_overrides[get_notification_service] = lambda: notification_service
    app.dependency_overrides[get_async_session] = override_get_async_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
