"""
Declarative base and the column mixins shared by the records tables.

Role membership and curriculum link rows only need ``UUIDMixin``; people,
courses, curricula and exams use ``StandardMixin`` so admins can see when a
record was created or last changed.
"""

from datetime import datetime
from uuid import UUID as PyUUID, uuid4
from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID


class Base(DeclarativeBase):
    # Timestamps are always stored timezone-aware (UTC)
    type_annotation_map = {
        datetime: DateTime(timezone=True),
    }


class UUIDMixin:
    id: Mapped[PyUUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid4)


class TimestampMixin:
    """Database-side creation and modification times."""

    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class StandardMixin(UUIDMixin, TimestampMixin):
    pass
