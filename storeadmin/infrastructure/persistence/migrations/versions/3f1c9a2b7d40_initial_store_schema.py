"""Initial schema: locations, customers, menus, categories, staff, orders

Revision ID: 3f1c9a2b7d40
Revises:
Create Date: 2026-09-28 10:14:52.118204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c9a2b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create initial schema."""
    # Create locations table and the polymorphic locationables pivot
    op.create_table(
        "locations",
        sa.Column("location_id", sa.Integer(), nullable=False),
        sa.Column("location_name", sa.String(length=128), nullable=False),
        sa.Column("location_email", sa.String(length=96), nullable=True),
        sa.Column("location_status", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("location_id"),
    )
    op.create_table(
        "locationables",
        sa.Column("location_id", sa.Integer(), nullable=False),
        sa.Column("locationable_id", sa.Integer(), nullable=False),
        sa.Column("locationable_type", sa.String(length=64), nullable=False),
        sa.ForeignKeyConstraint(
            ["location_id"], ["locations.location_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("location_id", "locationable_id", "locationable_type"),
    )

    # Create customer tables
    op.create_table(
        "customer_groups",
        sa.Column("customer_group_id", sa.Integer(), nullable=False),
        sa.Column("group_name", sa.String(length=32), nullable=False),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("customer_group_id"),
    )
    op.create_table(
        "customers",
        sa.Column("customer_id", sa.Integer(), nullable=False),
        sa.Column("first_name", sa.String(length=32), nullable=False),
        sa.Column("last_name", sa.String(length=32), nullable=False),
        sa.Column("email", sa.String(length=96), nullable=False),
        sa.Column("telephone", sa.String(length=32), nullable=True),
        sa.Column("customer_group_id", sa.Integer(), nullable=True),
        sa.Column("status", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["customer_group_id"],
            ["customer_groups.customer_group_id"],
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("customer_id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index(
        op.f("ix_customers_customer_group_id"), "customers", ["customer_group_id"], unique=False
    )

    # Create menu tables
    op.create_table(
        "categories",
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        sa.Column("priority", sa.Integer(), nullable=False),
        sa.Column("status", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(
            ["parent_id"], ["categories.category_id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("category_id"),
    )
    op.create_index(op.f("ix_categories_parent_id"), "categories", ["parent_id"], unique=False)
    op.create_table(
        "allergens",
        sa.Column("allergen_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("status", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("allergen_id"),
    )
    op.create_table(
        "menus",
        sa.Column("menu_id", sa.Integer(), nullable=False),
        sa.Column("menu_name", sa.String(length=255), nullable=False),
        sa.Column("menu_description", sa.Text(), nullable=True),
        sa.Column("menu_price", sa.Numeric(precision=15, scale=4), nullable=False),
        sa.Column("menu_priority", sa.Integer(), nullable=False),
        sa.Column("menu_status", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("menu_id"),
    )
    op.create_table(
        "menu_categories",
        sa.Column("menu_id", sa.Integer(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["menu_id"], ["menus.menu_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["category_id"], ["categories.category_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("menu_id", "category_id"),
    )
    op.create_table(
        "allergenables",
        sa.Column("allergen_id", sa.Integer(), nullable=False),
        sa.Column("allergenable_id", sa.Integer(), nullable=False),
        sa.Column("allergenable_type", sa.String(length=64), nullable=False),
        sa.ForeignKeyConstraint(
            ["allergen_id"], ["allergens.allergen_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("allergen_id", "allergenable_id", "allergenable_type"),
    )

    # Create staff tables
    op.create_table(
        "staff_groups",
        sa.Column("staff_group_id", sa.Integer(), nullable=False),
        sa.Column("staff_group_name", sa.String(length=128), nullable=False),
        sa.PrimaryKeyConstraint("staff_group_id"),
    )
    op.create_table(
        "staffs",
        sa.Column("staff_id", sa.Integer(), nullable=False),
        sa.Column("staff_name", sa.String(length=128), nullable=False),
        sa.Column("staff_email", sa.String(length=96), nullable=False),
        sa.Column("staff_status", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("staff_id"),
        sa.UniqueConstraint("staff_email"),
    )
    op.create_table(
        "staffs_groups",
        sa.Column("staff_id", sa.Integer(), nullable=False),
        sa.Column("staff_group_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["staff_id"], ["staffs.staff_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["staff_group_id"], ["staff_groups.staff_group_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("staff_id", "staff_group_id"),
    )
    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("staff_id", sa.Integer(), nullable=True),
        sa.Column("username", sa.String(length=128), nullable=False),
        sa.Column("is_activated", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["staff_id"], ["staffs.staff_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id"),
        sa.UniqueConstraint("staff_id"),
        sa.UniqueConstraint("username"),
    )

    # Create orders table
    op.create_table(
        "orders",
        sa.Column("order_id", sa.Integer(), nullable=False),
        sa.Column("customer_id", sa.Integer(), nullable=True),
        sa.Column("location_id", sa.Integer(), nullable=False),
        sa.Column("first_name", sa.String(length=32), nullable=False),
        sa.Column("last_name", sa.String(length=32), nullable=False),
        sa.Column("order_type", sa.String(length=32), nullable=False),
        sa.Column("order_date", sa.Date(), nullable=False),
        sa.Column("order_time", sa.Time(), nullable=False),
        sa.Column("order_total", sa.Numeric(precision=15, scale=4), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["customer_id"], ["customers.customer_id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(["location_id"], ["locations.location_id"]),
        sa.PrimaryKeyConstraint("order_id"),
    )
    op.create_index(op.f("ix_orders_customer_id"), "orders", ["customer_id"], unique=False)
    op.create_index(op.f("ix_orders_location_id"), "orders", ["location_id"], unique=False)


def downgrade() -> None:
    """Drop initial schema."""
    op.drop_index(op.f("ix_orders_location_id"), table_name="orders")
    op.drop_index(op.f("ix_orders_customer_id"), table_name="orders")
    op.drop_table("orders")
    op.drop_table("users")
    op.drop_table("staffs_groups")
    op.drop_table("staffs")
    op.drop_table("staff_groups")
    op.drop_table("allergenables")
    op.drop_table("menu_categories")
    op.drop_table("menus")
    op.drop_table("allergens")
    op.drop_index(op.f("ix_categories_parent_id"), table_name="categories")
    op.drop_table("categories")
    op.drop_index(op.f("ix_customers_customer_group_id"), table_name="customers")
    op.drop_table("customers")
    op.drop_table("customer_groups")
    op.drop_table("locationables")
    op.drop_table("locations")
