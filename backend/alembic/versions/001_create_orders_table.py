"""Create orders table

Revision ID: 001
Revises: None
Create Date: 2024-11-20 00:00:00.000000+00:00

What:  Creates the `orders` table holding every order request.
How:   Generic column types so the same migration runs on PostgreSQL and
       SQLite. Column meanings are documented in bakery/models/order.py.

Rollback: downgrade() drops the table (all orders are lost).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "orders",
        sa.Column(
            "id",
            sa.Uuid(as_uuid=True),
            nullable=False,
            comment="Order identifier",
        ),
        sa.Column("name", sa.String(255), nullable=False, comment="Customer full name"),
        sa.Column("email", sa.String(320), nullable=False, comment="Customer e-mail address"),
        sa.Column(
            "phone",
            sa.String(50),
            nullable=False,
            comment="Customer phone number, stored as entered",
        ),
        sa.Column(
            "cake_quantity",
            sa.Integer(),
            nullable=False,
            server_default=sa.text("0"),
            comment="Number of Christmas fruit cakes",
        ),
        sa.Column(
            "sorrel_quantity",
            sa.Integer(),
            nullable=False,
            server_default=sa.text("0"),
            comment="Number of bottles of sorrel",
        ),
        sa.Column(
            "special_requests",
            sa.Text(),
            nullable=False,
            server_default=sa.text("''"),
            comment="Free-text notes: allergies, delivery instructions",
        ),
        sa.Column(
            "status",
            sa.String(50),
            nullable=False,
            server_default=sa.text("'pending'"),
            comment="Order state; always 'pending'",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
            comment="When the order request was submitted (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # Listing is always newest first
    op.create_index(
        "idx_orders_created_at",
        "orders",
        [sa.text("created_at DESC")],
    )


def downgrade() -> None:
    op.drop_index("idx_orders_created_at", table_name="orders")
    op.drop_table("orders")
