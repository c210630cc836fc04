"""Current-user pointer repository protocol."""

from typing import Protocol

from domain.entities.session import UserSession


class ICurrentUserRepository(Protocol):
    """Repository interface for per-session current-user pointers."""

    async def get(self, session: UserSession) -> str | None:
        """Get the profile id the session points at."""
        ...

    async def set(self, session: UserSession, profile_id: str) -> None:
        """Point the session at ``profile_id``."""
        ...

    async def clear(self, session: UserSession) -> None:
        """Remove the session's pointer."""
        ...
