"""Helpers shared by the domain entities."""

import secrets
import string
from datetime import UTC, datetime

_ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 11


def generate_id() -> str:
    """Generate a short random base-36 identifier.

    Collisions are practically negligible at this scale but not impossible.
    """
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(ID_LENGTH))


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)
