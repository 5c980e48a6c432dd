"""
Declarative base & shared mixins for all models.

Entity ids are UUID4 strings generated application-side — screens hand
their id around as an opaque device code, so it stays a plain string
all the way to the client.  All timestamps are timezone-aware UTC.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (some drivers drop tzinfo on read)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Base(DeclarativeBase):
    """SQLAlchemy declarative base — all models inherit from this."""
    pass


class UUIDPrimaryKeyMixin:
    """Adds a string UUID `id` primary key to any model that inherits it."""

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
        nullable=False,
    )
