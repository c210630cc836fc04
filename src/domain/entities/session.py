"""Session context entity."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UserSession:
    """Identifies whose "current user" pointer an operation reads and writes.

    The default session (no ``session_id``) uses the bare pointer key, so a
    single-client deployment keeps the plain storage layout.
    """

    session_id: str | None = None

    def pointer_key(self, base_key: str) -> str:
        if not self.session_id:
            return base_key
        return f"{base_key}:{self.session_id}"
