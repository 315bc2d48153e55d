"""
Bev's Bakery Backend - Orders Route Handlers
=============================================

What:  Handles POST /api/orders (create), GET /api/orders (list) and
       GET /api/orders/{id} (detail).
How:   Body validation happens in OrderCreate; everything else is delegated
       to OrderService with the storage chosen by get_order_storage().
Who:   Called by the order form on the marketing page and by API clients.

Methods other than the ones declared here get 405 Method Not Allowed with
an Allow header from FastAPI's router.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from bakery.schemas.order import ErrorResponse, OrderCreate, OrderResponse
from bakery.services.order_service import order_service
from bakery.services.order_storage import OrderStorage, get_order_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Orders"])


@router.post(
    "/orders",
    status_code=201,
    response_model=OrderResponse,
    responses={
        201: {"description": "Order request stored", "model": OrderResponse},
        400: {"description": "Invalid order request", "model": ErrorResponse},
        429: {"description": "Rate limit exceeded", "model": ErrorResponse},
        500: {"description": "Failed to create order", "model": ErrorResponse},
    },
    summary="Submit an order request",
    description=(
        "Stores a customer's request for Christmas fruit cakes and/or sorrel. "
        "At least one item must be ordered. The order is saved with status "
        "'pending'; the bakery confirms by phone or e-mail."
    ),
)
async def create_order(
    order: OrderCreate,
    storage: OrderStorage = Depends(get_order_storage),
) -> OrderResponse:
    return await order_service.create_order(storage, order)


@router.get(
    "/orders",
    response_model=List[OrderResponse],
    responses={
        200: {"description": "All orders, newest first"},
        500: {"description": "Failed to fetch orders", "model": ErrorResponse},
    },
    summary="List all order requests",
)
async def list_orders(
    response: Response,
    storage: OrderStorage = Depends(get_order_storage),
) -> List[OrderResponse]:
    """
    List every stored order, newest first.

    X-Total-Count carries the number of orders so a client can show it
    without counting the array.
    """
    orders = await order_service.list_orders(storage)
    response.headers["X-Total-Count"] = str(len(orders))
    response.headers["Cache-Control"] = "no-store"
    return orders


@router.get(
    "/orders/{order_id}",
    response_model=OrderResponse,
    responses={
        200: {"description": "The order", "model": OrderResponse},
        404: {"description": "Order not found", "model": ErrorResponse},
        500: {"description": "Failed to fetch order", "model": ErrorResponse},
    },
    summary="Get a single order by ID",
)
async def get_order(
    order_id: str,
    storage: OrderStorage = Depends(get_order_storage),
) -> OrderResponse:
    """
    Args:
        order_id: Taken as a plain string; ids that are not UUIDs simply
                  match nothing and return 404 rather than 422.
    """
    return await order_service.get_order(storage, order_id)
