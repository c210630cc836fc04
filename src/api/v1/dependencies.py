"""Dependency injection factories for API v1."""

import asyncio
from functools import lru_cache
from typing import Annotated, Callable

from fastapi import Depends, Header

from core.exceptions import NotLoggedInError
from domain.entities.profile import UserProfile
from domain.entities.session import UserSession
from domain.services.notification_service import NotificationService
from domain.services.profile_service import ProfileService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


@lru_cache
def get_storage_lock() -> asyncio.Lock:
    """Process-wide lock serializing every read-modify-write on the storage."""
    return asyncio.Lock()


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""
    lock = get_storage_lock()

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory, lock)

    return factory


@lru_cache
def get_notification_service() -> NotificationService:
    """Get Notification service instance."""
    return NotificationService(get_uow_factory())


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(
        get_uow_factory(),
        notification_service=get_notification_service(),
    )


# --- Session ---


async def get_user_session(
    x_session_id: Annotated[
        str | None,
        Header(description="Client session; omit for the default session"),
    ] = None,
) -> UserSession:
    """Build the session context for this request."""
    return UserSession(session_id=x_session_id or None)


CurrentSession = Annotated[UserSession, Depends(get_user_session)]


async def get_logged_in_user(
    session: CurrentSession,
    service: ProfileService = Depends(get_profile_service),
) -> UserProfile:
    """
    Dependency to get the session's current user profile.

    Raises:
        NotLoggedInError: If the session has no current user
    """
    profile = await service.get_current_user(session)
    if profile is None:
        raise NotLoggedInError()
    return profile


LoggedInUser = Annotated[UserProfile, Depends(get_logged_in_user)]
