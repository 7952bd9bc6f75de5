"""SQLAlchemy mixins for common model patterns.

Provides: TimestampMixin (created_at/updated_at) and Locationable (marks
models whose records are attached to locations through the locationables
pivot; relation queries over them are scoped to the admin's location).
"""

from datetime import datetime
from typing import ClassVar

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class Locationable:
    """Mixin for models attached to locations via the locationables pivot.

    Subclasses define the relationship named by ``location_relation`` (see
    models.location.locations_relationship).
    """

    location_relation: ClassVar[str] = "locations"
