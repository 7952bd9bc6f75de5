"""Order ORM model. Table: orders."""

from __future__ import annotations

from datetime import date, time
from decimal import Decimal

from sqlalchemy import Boolean, Date, ForeignKey, Integer, Numeric, String, Time, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storeadmin.infrastructure.persistence.database import Base
from storeadmin.infrastructure.persistence.models.customer import Customer
from storeadmin.infrastructure.persistence.models.location import Location
from storeadmin.infrastructure.persistence.models.mixins import TimestampMixin


class Order(TimestampMixin, Base):
    """Customer order placed at a location.

    order_time_is_asap is True when the customer asked for the order as soon
    as possible instead of at order_date/order_time.
    """

    __tablename__ = "orders"

    order_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    customer_id: Mapped[int | None] = mapped_column(
        ForeignKey("customers.customer_id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    location_id: Mapped[int] = mapped_column(
        ForeignKey("locations.location_id"), nullable=False, index=True
    )
    first_name: Mapped[str] = mapped_column(String(32), nullable=False)
    last_name: Mapped[str] = mapped_column(String(32), nullable=False)
    order_type: Mapped[str] = mapped_column(String(32), nullable=False)
    order_date: Mapped[date] = mapped_column(Date, nullable=False)
    order_time: Mapped[time] = mapped_column(Time, nullable=False)
    order_time_is_asap: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    order_total: Mapped[Decimal | None] = mapped_column(Numeric(15, 4), nullable=True)

    customer: Mapped[Customer | None] = relationship(back_populates="orders")
    location: Mapped[Location] = relationship()
