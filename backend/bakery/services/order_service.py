"""
Bev's Bakery Backend - Order Service
=====================================

What:  Business logic for order requests: create, list, get, and the admin
       dashboard summary.
How:   Receives an OrderStorage for each call, converts stored Order rows
       into OrderResponse models, and turns a missing order into
       NotFoundError.
Who:   Called by the /api/orders routes and the admin page.

OrderService keeps no state of its own; the storage it is handed decides
where orders live.
"""

import logging
from decimal import Decimal
from typing import List, Sequence

from bakery.exceptions import NotFoundError
from bakery.models.order import Order
from bakery.schemas.order import (
    OrderCreate,
    OrderDashboard,
    OrderResponse,
    OrderSummaryRow,
)
from bakery.services.catalog import order_total
from bakery.services.order_storage import OrderStorage

logger = logging.getLogger(__name__)


class OrderService:
    """
    Responsibilities:
        - create_order(): validate-then-store workflow for a new request
        - list_orders(): every order, newest first
        - get_order(): single order with not-found handling
        - summarize(): per-order totals and the grand total for the dashboard
    """

    async def create_order(self, storage: OrderStorage, data: OrderCreate) -> OrderResponse:
        """
        Store a validated order request.

        Args:
            storage: Where the order is kept (injected per request)
            data: Body already validated against OrderCreate

        Returns:
            OrderResponse with the new id, 'pending' status and creation time

        Raises:
            DatabaseError: The storage could not save the order (→ 500)
        """
        order = await storage.create_order(data)
        logger.info(
            "Order %s created: cake=%d sorrel=%d total=%s",
            order.id,
            order.cake_quantity,
            order.sorrel_quantity,
            order_total(order.cake_quantity, order.sorrel_quantity),
        )
        return OrderResponse.model_validate(order)

    async def list_orders(self, storage: OrderStorage) -> List[OrderResponse]:
        orders = await storage.get_all_orders()
        return [OrderResponse.model_validate(order) for order in orders]

    async def get_order(self, storage: OrderStorage, order_id: str) -> OrderResponse:
        """
        Raises:
            NotFoundError: No order has this id (→ 404 "Order not found")
        """
        order = await storage.get_order(order_id)
        if order is None:
            raise NotFoundError(
                resource="order",
                resource_id=order_id,
                message="Order not found",
            )
        return OrderResponse.model_validate(order)

    def summarize(self, orders: Sequence[Order]) -> OrderDashboard:
        """Dashboard rows in the given order, each with cake*15 + sorrel*5."""
        rows = [
            OrderSummaryRow(
                order=OrderResponse.model_validate(order),
                total=order_total(order.cake_quantity, order.sorrel_quantity),
            )
            for order in orders
        ]
        grand_total = sum((row.total for row in rows), Decimal("0.00"))
        return OrderDashboard(
            rows=rows,
            order_count=len(rows),
            grand_total=grand_total,
        )


order_service = OrderService()
