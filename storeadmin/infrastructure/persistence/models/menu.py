"""Menu, Category and Allergen ORM models.

Menus belong to many categories (menu_categories pivot) and are attached to
locations and allergens through polymorphic pivots. Categories form a tree
through parent_id.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Table,
    Text,
    or_,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storeadmin.domain.enums import RelationType
from storeadmin.infrastructure.persistence.database import Base
from storeadmin.infrastructure.persistence.models.location import (
    Location,
    locations_relationship,
)
from storeadmin.infrastructure.persistence.models.mixins import Locationable
from storeadmin.infrastructure.persistence.scopes import query_scope

if TYPE_CHECKING:
    from storeadmin.infrastructure.persistence.relation_query import RelationQuery

menu_categories = Table(
    "menu_categories",
    Base.metadata,
    Column(
        "menu_id",
        Integer,
        ForeignKey("menus.menu_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "category_id",
        Integer,
        ForeignKey("categories.category_id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

allergenables = Table(
    "allergenables",
    Base.metadata,
    Column(
        "allergen_id",
        Integer,
        ForeignKey("allergens.allergen_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("allergenable_id", Integer, primary_key=True),
    Column("allergenable_type", String(64), primary_key=True),
)


class Category(Locationable, Base):
    """Menu category; categories nest through parent_id. Table: categories."""

    __tablename__ = "categories"

    category_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    parent_id: Mapped[int | None] = mapped_column(
        ForeignKey("categories.category_id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    priority: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    status: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    parent: Mapped[Category | None] = relationship(
        remote_side=[category_id], back_populates="children"
    )
    children: Mapped[list[Category]] = relationship(back_populates="parent")
    menus: Mapped[list[Menu]] = relationship(
        secondary=menu_categories, back_populates="categories"
    )
    locations: Mapped[list[Location]] = locations_relationship(
        "Category", "category_id", "categories"
    )


class Allergen(Base):
    """Allergen shown on menus. Table: allergens."""

    __tablename__ = "allergens"

    allergen_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    status: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    menus: Mapped[list[Menu]] = relationship(
        "Menu",
        secondary=allergenables,
        primaryjoin="Allergen.allergen_id == foreign(allergenables.c.allergen_id)",
        secondaryjoin=(
            "and_(Menu.menu_id == foreign(allergenables.c.allergenable_id), "
            "allergenables.c.allergenable_type == 'menus')"
        ),
        viewonly=True,
        info={"relation_type": RelationType.MORPHED_BY_MANY.value},
    )


class Menu(Locationable, Base):
    """Menu item. Table: menus."""

    __tablename__ = "menus"

    menu_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    menu_name: Mapped[str] = mapped_column(String(255), nullable=False)
    menu_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    menu_price: Mapped[Decimal] = mapped_column(Numeric(15, 4), nullable=False)
    menu_priority: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    menu_status: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    categories: Mapped[list[Category]] = relationship(
        secondary=menu_categories, back_populates="menus"
    )
    allergens: Mapped[list[Allergen]] = relationship(
        "Allergen",
        secondary=allergenables,
        primaryjoin=(
            "and_(Menu.menu_id == foreign(allergenables.c.allergenable_id), "
            "allergenables.c.allergenable_type == 'menus')"
        ),
        secondaryjoin="Allergen.allergen_id == foreign(allergenables.c.allergen_id)",
        viewonly=True,
        info={"relation_type": RelationType.MORPH_TO_MANY.value},
    )
    locations: Mapped[list[Location]] = locations_relationship(
        "Menu", "menu_id", "menus"
    )


@query_scope(Category, "sorted")
def _sorted_categories(query: RelationQuery) -> RelationQuery:
    return query.order_by(Category.priority, Category.name)


@query_scope(Category, "is_enabled")
def _enabled_categories(query: RelationQuery, *_: Any) -> RelationQuery:
    return query.where("status", "=", True)


@query_scope(Category, "excluding_children_of")
def _excluding_children_of(query: RelationQuery, owner: Category | None = None) -> RelationQuery:
    """Drop direct children of the owner category (a child cannot be its parent)."""
    if owner is None or owner.category_id is None:
        return query
    return query.where_clause(
        or_(Category.parent_id.is_(None), Category.parent_id != owner.category_id)
    )


@query_scope(Menu, "sorted")
def _sorted_menus(query: RelationQuery) -> RelationQuery:
    return query.order_by(Menu.menu_priority, Menu.menu_name)


@query_scope(Menu, "is_enabled")
def _enabled_menus(query: RelationQuery, *_: Any) -> RelationQuery:
    return query.where("menu_status", "=", True)


@query_scope(Allergen, "is_enabled")
def _enabled_allergens(query: RelationQuery, *_: Any) -> RelationQuery:
    return query.where("status", "=", True)
