"""Location ORM model and the polymorphic locationables pivot.

A location is a store branch. Menus, categories and staff are attached to
locations through locationables (locationable_type + locationable_id);
records with no location row are shared by every location.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table, or_
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storeadmin.domain.enums import RelationType
from storeadmin.infrastructure.persistence.database import Base
from storeadmin.infrastructure.persistence.models.mixins import (
    Locationable,
    TimestampMixin,
)
from storeadmin.infrastructure.persistence.scopes import query_scope

if TYPE_CHECKING:
    from storeadmin.infrastructure.persistence.models.menu import Menu
    from storeadmin.infrastructure.persistence.models.staff import Staff
    from storeadmin.infrastructure.persistence.relation_query import RelationQuery

locationables = Table(
    "locationables",
    Base.metadata,
    Column(
        "location_id",
        Integer,
        ForeignKey("locations.location_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("locationable_id", Integer, primary_key=True),
    Column("locationable_type", String(64), primary_key=True),
)


def locations_relationship(owner: str, key: str, morph_type: str) -> Any:
    """Return a morphToMany relationship from `owner` to Location via locationables."""
    return relationship(
        "Location",
        secondary=locationables,
        primaryjoin=(
            f"and_({owner}.{key} == foreign(locationables.c.locationable_id), "
            f"locationables.c.locationable_type == '{morph_type}')"
        ),
        secondaryjoin="Location.location_id == foreign(locationables.c.location_id)",
        viewonly=True,
        info={"relation_type": RelationType.MORPH_TO_MANY.value},
    )


def _locationables_by(owner: str, key: str, morph_type: str) -> Any:
    """Return the inverse (morphedByMany) relationship from Location to `owner`."""
    return relationship(
        owner,
        secondary=locationables,
        primaryjoin="Location.location_id == foreign(locationables.c.location_id)",
        secondaryjoin=(
            f"and_({owner}.{key} == foreign(locationables.c.locationable_id), "
            f"locationables.c.locationable_type == '{morph_type}')"
        ),
        viewonly=True,
        info={"relation_type": RelationType.MORPHED_BY_MANY.value},
    )


class Location(TimestampMixin, Base):
    """Store location (branch). Table: locations."""

    __tablename__ = "locations"

    location_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    location_name: Mapped[str] = mapped_column(String(128), nullable=False)
    location_email: Mapped[str | None] = mapped_column(String(96), nullable=True)
    location_status: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    menus: Mapped[list[Menu]] = _locationables_by("Menu", "menu_id", "menus")
    staffs: Mapped[list[Staff]] = _locationables_by("Staff", "staff_id", "staffs")


@query_scope(Location, "sorted")
def _sorted_locations(query: RelationQuery) -> RelationQuery:
    return query.order_by(Location.location_name)


@query_scope(Location, "is_enabled")
def _enabled_locations(query: RelationQuery, *_: Any) -> RelationQuery:
    return query.where("location_status", "=", True)


@query_scope(Locationable, "where_has_or_doesnt_have_location")
def _where_has_or_doesnt_have_location(
    query: RelationQuery, location_id: int | list[int]
) -> RelationQuery:
    """Keep records attached to the location(s) and records attached to none."""
    ids = location_id if isinstance(location_id, list) else [location_id]
    relation = getattr(query.model, query.model.location_relation)
    return query.where_clause(
        or_(~relation.any(), relation.any(Location.location_id.in_(ids)))
    )
