"""
Base configurations and mixins for database models.

Provides the declarative base shared by every model, plus mixins for UUID
primary keys and creation/update timestamps.
"""

import uuid
from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, Uuid
from sqlalchemy.orm import declarative_base


def utcnow() -> datetime:
    return datetime.now(UTC)


Base = declarative_base()


class TimestampMixin:
    """
    Adds ``created_at`` and ``updated_at`` columns.

    Timestamps are produced by the application rather than the database so
    that they carry microsecond resolution on every backend.
    """

    created_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
        comment="Timestamp when the record was created",
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
        comment="Timestamp when the record was last updated",
    )


class UUIDMixin:
    """Adds a UUID4 primary key generated on insert."""

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        index=True,
        comment="Primary key using UUID4 format",
    )


__all__ = ["Base", "TimestampMixin", "UUIDMixin", "utcnow"]
