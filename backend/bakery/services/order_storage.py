"""
Bev's Bakery Backend - Order Storage
=====================================

What:  Persistence for orders: create one, list all, get one by id.
How:   OrderStorage is the interface; two implementations exist:

       DatabaseOrderStorage  → the `orders` table through an AsyncSession
       InMemoryOrderStorage  → a process-local list, newest order first

Who:   OrderService calls it; routes receive one through get_order_storage().

Both implementations assign the id, the 'pending' status and the UTC
creation time themselves, so a stored order looks the same whichever
backend produced it.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bakery.config import settings
from bakery.database import get_db_session
from bakery.exceptions import DatabaseError
from bakery.models.order import ORDER_STATUS_PENDING, Order
from bakery.schemas.order import OrderCreate

logger = logging.getLogger(__name__)


def build_order(data: OrderCreate) -> Order:
    """New Order with every field set, including the ones the table defaults."""
    return Order(
        id=uuid.uuid4(),
        name=data.name,
        email=str(data.email),
        phone=data.phone,
        cake_quantity=data.cake_quantity,
        sorrel_quantity=data.sorrel_quantity,
        special_requests=data.special_requests or "",
        status=ORDER_STATUS_PENDING,
        created_at=datetime.now(timezone.utc),
    )


def parse_order_id(order_id: str) -> Optional[uuid.UUID]:
    """Order ids are UUIDs; anything else can never match a stored order."""
    try:
        return uuid.UUID(str(order_id))
    except (ValueError, AttributeError):
        return None


class OrderStorage(ABC):
    """
    Contract:
        - create_order() returns the stored order with id/status/created_at set
        - get_all_orders() returns every order, newest first
        - get_order() returns None for unknown or malformed ids
        - storage failures surface as DatabaseError
    """

    @abstractmethod
    async def create_order(self, data: OrderCreate) -> Order:
        ...

    @abstractmethod
    async def get_all_orders(self) -> List[Order]:
        ...

    @abstractmethod
    async def get_order(self, order_id: str) -> Optional[Order]:
        ...


class DatabaseOrderStorage(OrderStorage):
    """
    Orders table access through one request-scoped AsyncSession.

    Writes are flushed, not committed; get_db_session() commits when the
    request finishes and rolls back if anything raised.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_order(self, data: OrderCreate) -> Order:
        order = build_order(data)
        try:
            self.session.add(order)
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating order: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to create order",
                context={"error_type": type(e).__name__},
            ) from e
        return order

    async def get_all_orders(self) -> List[Order]:
        try:
            result = await self.session.execute(
                select(Order).order_by(desc(Order.created_at))
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing orders: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch orders",
                context={"error_type": type(e).__name__},
            ) from e

    async def get_order(self, order_id: str) -> Optional[Order]:
        parsed_id = parse_order_id(order_id)
        if parsed_id is None:
            return None
        try:
            result = await self.session.execute(
                select(Order).where(Order.id == parsed_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching order %s: %s", order_id, str(e))
            raise DatabaseError(
                message="Failed to fetch order",
                context={"order_id": str(order_id)},
            ) from e


class InMemoryOrderStorage(OrderStorage):
    """
    Orders kept in a list for the life of the process.

    New orders go to the front, so the list is already newest first.
    Each worker process has its own list and nothing survives a restart.
    """

    def __init__(self) -> None:
        self._orders: List[Order] = []

    async def create_order(self, data: OrderCreate) -> Order:
        order = build_order(data)
        self._orders.insert(0, order)
        return order

    async def get_all_orders(self) -> List[Order]:
        return list(self._orders)

    async def get_order(self, order_id: str) -> Optional[Order]:
        parsed_id = parse_order_id(order_id)
        if parsed_id is None:
            return None
        return next((o for o in self._orders if o.id == parsed_id), None)

    def clear(self) -> None:
        self._orders.clear()


# ── Module-level store for the in-memory backend ─────────────────────────
memory_storage = InMemoryOrderStorage()


def get_order_storage(session: AsyncSession = Depends(get_db_session)) -> OrderStorage:
    """
    FastAPI dependency returning the configured OrderStorage.

    The session comes from get_db_session(), which commits when the request
    succeeds. With the memory backend the session is never used and so
    never connects.
    """
    if settings.uses_database:
        return DatabaseOrderStorage(session)
    return memory_storage
