"""SQLAlchemy ORM models."""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from domain.entities.common import utcnow


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class StorageEntryModel(Base):
    """One keyed blob of the key-value storage.

    Values are serialized JSON documents; the table knows nothing about
    their shape.
    """

    __tablename__ = "storage_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
    )
