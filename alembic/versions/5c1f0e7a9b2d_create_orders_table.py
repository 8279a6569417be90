"""create orders table

Revision ID: 5c1f0e7a9b2d
Revises:
Create Date: 2026-10-19 09:12:44.318204

This migration creates the orders table.

Table: orders
- One row per order, holding only its current lifecycle state

Columns:
- id: Order identifier (VARCHAR 64, client supplied or UUID4 string)
- status: Lowercase status token (VARCHAR 20)
- created_at: Creation timestamp
- updated_at: Last status change timestamp

Indexes:
- Primary key on id
- status (for filtering)

Constraints:
- status must be one of created, processing, shipped, delivered
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5c1f0e7a9b2d'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create orders table.
    """
    op.create_table(
        "orders",
        sa.Column("id", sa.String(length=64), nullable=False, comment="Order identifier"),
        sa.Column("status", sa.String(length=20), nullable=False, comment="Lowercase status token"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),

        # Primary key
        sa.PrimaryKeyConstraint("id", name=op.f("pk_orders")),

        # Check constraints
        sa.CheckConstraint(
            "status IN ('created', 'processing', 'shipped', 'delivered')",
            name=op.f("ck_orders_status_valid"),
        ),
        sa.CheckConstraint(
            "updated_at >= created_at",
            name=op.f("ck_orders_updated_after_created"),
        ),
    )

    # Create indexes
    op.create_index(op.f("ix_orders_status"), "orders", ["status"], unique=False)


def downgrade() -> None:
    """
    Drop orders table.
    """
    op.drop_index(op.f("ix_orders_status"), table_name="orders")
    op.drop_table("orders")
