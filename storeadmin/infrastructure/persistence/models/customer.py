"""Customer and CustomerGroup ORM models."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storeadmin.infrastructure.persistence.database import Base
from storeadmin.infrastructure.persistence.models.mixins import TimestampMixin
from storeadmin.infrastructure.persistence.scopes import query_scope

if TYPE_CHECKING:
    from storeadmin.infrastructure.persistence.models.order import Order
    from storeadmin.infrastructure.persistence.relation_query import RelationQuery


class CustomerGroup(Base):
    """Customer group (e.g. wholesale, VIP). Table: customer_groups."""

    __tablename__ = "customer_groups"

    customer_group_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    group_name: Mapped[str] = mapped_column(String(32), nullable=False)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)

    customers: Mapped[list[Customer]] = relationship(back_populates="group")


class Customer(TimestampMixin, Base):
    """Store customer. Table: customers."""

    __tablename__ = "customers"

    customer_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(32), nullable=False)
    last_name: Mapped[str] = mapped_column(String(32), nullable=False)
    email: Mapped[str] = mapped_column(String(96), nullable=False, unique=True)
    telephone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    customer_group_id: Mapped[int | None] = mapped_column(
        ForeignKey("customer_groups.customer_group_id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    status: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    group: Mapped[CustomerGroup | None] = relationship(back_populates="customers")
    orders: Mapped[list[Order]] = relationship(back_populates="customer")


@query_scope(Customer, "sorted")
def _sorted_customers(query: RelationQuery) -> RelationQuery:
    return query.order_by(Customer.first_name, Customer.last_name)


@query_scope(Customer, "is_enabled")
def _enabled_customers(query: RelationQuery, *_: Any) -> RelationQuery:
    return query.where("status", "=", True)


@query_scope(CustomerGroup, "sorted")
def _sorted_customer_groups(query: RelationQuery) -> RelationQuery:
    return query.order_by(CustomerGroup.group_name)
