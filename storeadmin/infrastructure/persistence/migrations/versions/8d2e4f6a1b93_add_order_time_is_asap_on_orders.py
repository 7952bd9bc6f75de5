"""add_order_time_is_asap_on_orders

Revision ID: 8d2e4f6a1b93
Revises: 3f1c9a2b7d40
Create Date: 2026-10-02 16:41:07.502318

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "8d2e4f6a1b93"
down_revision: Union[str, Sequence[str], None] = "3f1c9a2b7d40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Add order_time_is_asap flag to orders (existing orders are not ASAP)."""
    op.add_column(
        "orders",
        sa.Column(
            "order_time_is_asap",
            sa.Boolean(),
            server_default=sa.false(),
            nullable=False,
        ),
    )


def downgrade() -> None:
    """Remove order_time_is_asap column from orders table."""
    op.drop_column("orders", "order_time_is_asap")
