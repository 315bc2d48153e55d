"""
Bev's Bakery Backend - Order SQLAlchemy Model
==============================================

What:  ORM model representing the `orders` table.
Who:   Used by DatabaseOrderStorage for create/list/get and by Alembic.

Table Design:
    - UUID primary key, generated in Python so every dialect agrees
    - one quantity column per product (the catalog is fixed at two items)
    - status is always 'pending'; nothing in the system moves it
    - created_at is UTC with timezone; listing sorts on it, newest first
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Integer, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from bakery.database import Base

ORDER_STATUS_PENDING = "pending"


class Order(Base):
    """
    A customer's order request.

    Query Patterns:
        - List all orders: SELECT ... ORDER BY created_at DESC
          → Uses idx_orders_created_at
        - Get single order: SELECT ... WHERE id = :uuid
          → Uses the primary key
    """

    __tablename__ = "orders"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Order identifier",
    )

    # ── Contact Details ───────────────────────────────────────────────────
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Customer full name",
    )

    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        comment="Customer e-mail address",
    )

    phone: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Customer phone number, stored as entered",
    )

    # ── Quantities ────────────────────────────────────────────────────────
    cake_quantity: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
        comment="Number of Christmas fruit cakes",
    )

    sorrel_quantity: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
        comment="Number of bottles of sorrel",
    )

    special_requests: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        server_default=text("''"),
        comment="Free-text notes: allergies, delivery instructions",
    )

    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default=ORDER_STATUS_PENDING,
        server_default=text("'pending'"),
        comment="Order state; always 'pending'",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When the order request was submitted (UTC)",
    )

    __table_args__ = (
        Index("idx_orders_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return (
            f"<Order(id={self.id}, cake={self.cake_quantity}, "
            f"sorrel={self.sorrel_quantity}, status='{self.status}')>"
        )
