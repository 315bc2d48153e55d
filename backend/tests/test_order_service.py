"""
Bev's Bakery Backend - Order Service Unit Tests
================================================

What:  Tests for OrderService (create, list, get, summarize).
How:   Storage is a mock or the in-memory implementation; no database.

What we test:
    ✅ Create returns a pending OrderResponse from the stored order
    ✅ Missing order raises NotFoundError("Order not found")
    ✅ List keeps storage order (newest first)
    ✅ Dashboard totals use cake*15 + sorrel*5
    ✅ Storage errors propagate unchanged
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from bakery.exceptions import DatabaseError, NotFoundError
from bakery.models.order import Order
from bakery.schemas.order import OrderCreate
from bakery.services.order_service import OrderService
from bakery.services.order_storage import InMemoryOrderStorage


def make_order(cake: int = 1, sorrel: int = 0, **overrides) -> Order:
    fields = dict(
        id=uuid.uuid4(),
        name="Beverley Johnson",
        email="bev@example.com",
        phone="07852220010",
        cake_quantity=cake,
        sorrel_quantity=sorrel,
        special_requests="",
        status="pending",
        created_at=datetime.now(timezone.utc),
    )
    fields.update(overrides)
    return Order(**fields)


class TestOrderServiceCreate:
    """Tests for the create_order workflow."""

    def setup_method(self):
        self.service = OrderService()

    @pytest.mark.asyncio
    async def test_create_order_returns_pending_response(self, sample_order_data):
        storage = InMemoryOrderStorage()

        result = await self.service.create_order(storage, OrderCreate(**sample_order_data))

        assert result.status == "pending"
        assert result.cake_quantity == 2
        assert result.sorrel_quantity == 1
        assert result.special_requests == "No nuts please"
        assert result.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_create_order_stores_through_storage(self, sample_order_data):
        order = make_order(cake=2, sorrel=1)
        storage = MagicMock()
        storage.create_order = AsyncMock(return_value=order)

        result = await self.service.create_order(storage, OrderCreate(**sample_order_data))

        storage.create_order.assert_awaited_once()
        assert result.id == order.id

    @pytest.mark.asyncio
    async def test_create_order_database_error_propagates(self, sample_order_data):
        storage = MagicMock()
        storage.create_order = AsyncMock(
            side_effect=DatabaseError(message="Failed to create order")
        )

        with pytest.raises(DatabaseError, match="Failed to create order"):
            await self.service.create_order(storage, OrderCreate(**sample_order_data))


class TestOrderServiceGet:
    """Tests for get_order retrieval."""

    def setup_method(self):
        self.service = OrderService()

    @pytest.mark.asyncio
    async def test_get_order_found(self):
        order = make_order(cake=3)
        storage = MagicMock()
        storage.get_order = AsyncMock(return_value=order)

        result = await self.service.get_order(storage, str(order.id))

        assert result.id == order.id
        assert result.cake_quantity == 3
        storage.get_order.assert_awaited_once_with(str(order.id))

    @pytest.mark.asyncio
    async def test_get_order_not_found(self):
        storage = MagicMock()
        storage.get_order = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get_order(storage, "missing")

        assert exc_info.value.message == "Order not found"
        assert exc_info.value.context["resource_id"] == "missing"


class TestOrderServiceList:
    """Tests for list_orders."""

    def setup_method(self):
        self.service = OrderService()

    @pytest.mark.asyncio
    async def test_list_orders_empty(self):
        storage = MagicMock()
        storage.get_all_orders = AsyncMock(return_value=[])

        assert await self.service.list_orders(storage) == []

    @pytest.mark.asyncio
    async def test_list_orders_keeps_storage_order(self):
        newest = make_order(name="Newest")
        oldest = make_order(name="Oldest")
        storage = MagicMock()
        storage.get_all_orders = AsyncMock(return_value=[newest, oldest])

        result = await self.service.list_orders(storage)

        assert [o.name for o in result] == ["Newest", "Oldest"]


class TestOrderServiceSummarize:
    """Tests for the admin dashboard summary."""

    def setup_method(self):
        self.service = OrderService()

    def test_summarize_totals(self):
        orders = [make_order(cake=2, sorrel=1), make_order(cake=0, sorrel=4)]

        dashboard = self.service.summarize(orders)

        assert dashboard.order_count == 2
        assert [row.total for row in dashboard.rows] == [Decimal("35.00"), Decimal("20.00")]
        assert dashboard.grand_total == Decimal("55.00")

    def test_summarize_no_orders(self):
        dashboard = self.service.summarize([])

        assert dashboard.rows == []
        assert dashboard.order_count == 0
        assert dashboard.grand_total == Decimal("0.00")
