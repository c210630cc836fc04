"""Profile service layer with business logic."""

from collections.abc import Callable

import structlog

from core.exceptions import (
    DuplicateEmailError,
    NotLoggedInError,
    PrivateProfileError,
    ProfileNotFoundError,
)
from domain.entities.common import utcnow
from domain.entities.notification import NotificationType
from domain.entities.profile import NewProfile, ProfilePatch, ProfileStats, UserProfile
from domain.entities.session import UserSession
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.notification_service import NotificationService

logger = structlog.get_logger()


def _find(profiles: list[UserProfile], profile_id: str | None) -> UserProfile | None:
    if profile_id is None:
        return None
    return next((p for p in profiles if p.id == profile_id), None)


class ProfileService:
    """Service layer for profiles, the current-user pointer and follows.

    Every public method is one read-modify-write cycle: it opens a unit of
    work, reads the collections it needs, checks preconditions before
    touching anything, then writes and commits.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        notification_service: NotificationService,
    ) -> None:
        self._uow_factory = uow_factory
        self._notification_service = notification_service

    # --- Reads ---

    async def get_profiles(self) -> list[UserProfile]:
        """Get every profile in insertion order."""
        async with self._uow_factory() as uow:
            return await uow.profiles.get_all()

    async def get_profile_by_id(self, profile_id: str) -> UserProfile | None:
        async with self._uow_factory() as uow:
            return _find(await uow.profiles.get_all(), profile_id)

    async def get_visible_profile(self, session: UserSession, profile_id: str) -> UserProfile:
        """Get a profile as seen by the session's current user.

        Raises:
            ProfileNotFoundError: If the profile does not exist.
            PrivateProfileError: If the profile is private and not the viewer's own.
        """
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_all()
            viewer_id = await uow.current_user.get(session)

        profile = _find(profiles, profile_id)
        if not profile:
            raise ProfileNotFoundError(profile_id)
        if profile.is_private and not profile.is_owned_by(viewer_id):
            raise PrivateProfileError(profile_id)
        return profile

    async def search_profiles(self, term: str) -> list[UserProfile]:
        """Find profiles whose name, email or a skill contains ``term``.

        Matching is case-insensitive. A blank term matches nothing.
        """
        needle = term.strip().lower()
        if not needle:
            return []

        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_all()

        return [
            p
            for p in profiles
            if needle in p.name.lower()
            or needle in p.email.lower()
            or any(needle in skill.lower() for skill in p.skills)
        ]

    async def get_profile_stats(self, profile_id: str) -> ProfileStats:
        async with self._uow_factory() as uow:
            profile = _find(await uow.profiles.get_all(), profile_id)

        if not profile:
            raise ProfileNotFoundError(profile_id)
        return ProfileStats(
            profile_id=profile.id,
            view_count=profile.view_count,
            follower_count=len(profile.followers),
            following_count=len(profile.following),
        )

    # --- Current user ---

    async def get_current_user(self, session: UserSession) -> UserProfile | None:
        """Get the profile the session points at, if it still exists."""
        async with self._uow_factory() as uow:
            current_id = await uow.current_user.get(session)
            if current_id is None:
                return None
            return _find(await uow.profiles.get_all(), current_id)

    async def set_current_user(self, session: UserSession, profile_id: str) -> None:
        """Point the session at ``profile_id``. The id is not checked."""
        async with self._uow_factory() as uow:
            await uow.current_user.set(session, profile_id)
            await uow.commit()

    async def clear_current_user(self, session: UserSession) -> None:
        async with self._uow_factory() as uow:
            await uow.current_user.clear(session)
            await uow.commit()

    # --- Mutations ---

    async def create_profile(self, session: UserSession, data: NewProfile) -> UserProfile:
        """Create a profile and make it the session's current user.

        Raises:
            DuplicateEmailError: If any profile already uses ``data.email``.
        """
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_all()
            if any(p.email == data.email for p in profiles):
                raise DuplicateEmailError(data.email)

            now = utcnow()
            profile = UserProfile(
                name=data.name,
                email=data.email,
                bio=data.bio,
                image_url=data.image_url,
                skills=list(data.skills),
                is_private=data.is_private,
                following=list(data.following),
                followers=[],
                created_at=now,
                updated_at=now,
                view_count=0,
            )
            profiles.append(profile)
            await uow.profiles.save_all(profiles)
            await uow.current_user.set(session, profile.id)
            await uow.commit()

        logger.info("profile_created", profile_id=profile.id)
        return profile

    async def update_profile(self, patch: ProfilePatch) -> UserProfile:
        """Merge ``patch`` over the stored profile.

        Raises:
            ProfileNotFoundError: If no profile has ``patch.id``.
            DuplicateEmailError: If the new email belongs to another profile.
        """
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_all()
            profile = _find(profiles, patch.id)
            if not profile:
                raise ProfileNotFoundError(patch.id)

            if patch.email is not None and patch.email != profile.email:
                if any(p.email == patch.email and p.id != patch.id for p in profiles):
                    raise DuplicateEmailError(patch.email)

            patch.apply(profile, utcnow())
            await uow.profiles.save_all(profiles)
            await uow.commit()

        logger.info("profile_updated", profile_id=profile.id)
        return profile

    async def delete_profile(self, session: UserSession, profile_id: str) -> None:
        """Remove a profile; unknown ids are ignored.

        Clears the session pointer when it pointed at the deleted profile.
        Notifications addressed to the profile are kept.
        """
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_all()
            remaining = [p for p in profiles if p.id != profile_id]
            await uow.profiles.save_all(remaining)

            if await uow.current_user.get(session) == profile_id:
                await uow.current_user.clear(session)
            await uow.commit()

        if len(remaining) != len(profiles):
            logger.info("profile_deleted", profile_id=profile_id)

    async def view_profile(self, session: UserSession, profile_id: str) -> None:
        """Count a view of ``profile_id`` and notify its owner.

        The owner is only notified when the session has a current user other
        than the owner. Unknown ids are ignored.
        """
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_all()
            profile = _find(profiles, profile_id)
            if not profile:
                return

            profile.view_count += 1
            await uow.profiles.save_all(profiles)

            viewer = _find(profiles, await uow.current_user.get(session))
            if viewer and viewer.id != profile_id:
                await self._notification_service.notify(
                    uow,
                    user_id=profile_id,
                    message=f"{viewer.name} viewed your profile",
                    type=NotificationType.VIEW,
                )
            await uow.commit()

    async def toggle_follow(self, session: UserSession, target_id: str) -> bool:
        """Follow ``target_id``, or unfollow it if already followed.

        Both sides of the relationship are written in the same commit.

        Returns:
            The new following state.

        Raises:
            NotLoggedInError: If the session has no current user.
            ProfileNotFoundError: If the target is missing.
        """
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_all()
            # A pointer to a deleted profile counts as logged out
            current = _find(profiles, await uow.current_user.get(session))
            if current is None:
                raise NotLoggedInError()

            target = _find(profiles, target_id)
            if target is None:
                raise ProfileNotFoundError(target_id)

            if target_id in current.following:
                current.following = [pid for pid in current.following if pid != target_id]
                target.followers = [pid for pid in target.followers if pid != current.id]
                following = False
            else:
                current.following.append(target_id)
                target.followers.append(current.id)
                following = True

            await uow.profiles.save_all(profiles)
            if following:
                await self._notification_service.notify(
                    uow,
                    user_id=target_id,
                    message=f"{current.name} started following you",
                    type=NotificationType.FOLLOW,
                )
            await uow.commit()

        logger.info(
            "follow_toggled",
            follower_id=current.id,
            target_id=target_id,
            following=following,
        )
        return following

    async def is_following(self, session: UserSession, target_id: str) -> bool:
        current = await self.get_current_user(session)
        if current is None:
            return False
        return target_id in current.following
