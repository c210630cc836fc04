"""Profile repository protocol."""

from typing import Protocol

from domain.entities.profile import UserProfile


class IProfileRepository(Protocol):
    """Repository interface for the profile collection.

    The collection is stored as one blob: reads return every profile and
    writes replace the whole collection.
    """

    async def get_all(self) -> list[UserProfile]:
        """Get all profiles in insertion order."""
        ...

    async def save_all(self, profiles: list[UserProfile]) -> None:
        """Replace the stored collection with ``profiles``."""
        ...
