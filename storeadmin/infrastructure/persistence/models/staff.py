"""Staff, StaffGroup and User ORM models.

A staff member belongs to many staff groups, is attached to locations, and
has at most one admin user account.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storeadmin.infrastructure.persistence.database import Base
from storeadmin.infrastructure.persistence.models.location import (
    Location,
    locations_relationship,
)
from storeadmin.infrastructure.persistence.models.mixins import (
    Locationable,
    TimestampMixin,
)
from storeadmin.infrastructure.persistence.scopes import query_scope

if TYPE_CHECKING:
    from storeadmin.infrastructure.persistence.relation_query import RelationQuery

staffs_groups = Table(
    "staffs_groups",
    Base.metadata,
    Column(
        "staff_id",
        Integer,
        ForeignKey("staffs.staff_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "staff_group_id",
        Integer,
        ForeignKey("staff_groups.staff_group_id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class StaffGroup(Base):
    """Staff group (permissions bundle). Table: staff_groups."""

    __tablename__ = "staff_groups"

    staff_group_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    staff_group_name: Mapped[str] = mapped_column(String(128), nullable=False)

    staffs: Mapped[list[Staff]] = relationship(
        secondary=staffs_groups, back_populates="groups"
    )


class Staff(Locationable, TimestampMixin, Base):
    """Staff member. Table: staffs."""

    __tablename__ = "staffs"

    staff_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    staff_name: Mapped[str] = mapped_column(String(128), nullable=False)
    staff_email: Mapped[str] = mapped_column(String(96), nullable=False, unique=True)
    staff_status: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    groups: Mapped[list[StaffGroup]] = relationship(
        secondary=staffs_groups, back_populates="staffs"
    )
    user: Mapped[User | None] = relationship(back_populates="staff", uselist=False)
    locations: Mapped[list[Location]] = locations_relationship(
        "Staff", "staff_id", "staffs"
    )


class User(Base):
    """Admin user account of a staff member. Table: users."""

    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    staff_id: Mapped[int | None] = mapped_column(
        ForeignKey("staffs.staff_id", ondelete="CASCADE"),
        nullable=True,
        unique=True,
    )
    username: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    is_activated: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    staff: Mapped[Staff | None] = relationship(back_populates="user")


@query_scope(Staff, "sorted")
def _sorted_staff(query: RelationQuery) -> RelationQuery:
    return query.order_by(Staff.staff_name)


@query_scope(Staff, "is_enabled")
def _enabled_staff(query: RelationQuery, *_: object) -> RelationQuery:
    return query.where("staff_status", "=", True)


@query_scope(StaffGroup, "sorted")
def _sorted_staff_groups(query: RelationQuery) -> RelationQuery:
    return query.order_by(StaffGroup.staff_group_name)
