"""
Bev's Bakery Backend - Order Request/Response Schemas
======================================================

What:  Pydantic models defining the order API contract, shared by the JSON
       API and the HTML order form.
How:   FastAPI validates request bodies against OrderCreate and serializes
       responses through OrderResponse.

Wire format:
    Field names are snake_case in Python and camelCase on the wire
    (cakeQuantity, specialRequests, createdAt). Both spellings are accepted
    on input.

    {
        "name": "Beverley Johnson",
        "email": "bev@example.com",
        "phone": "07852220010",
        "cakeQuantity": 2,
        "sorrelQuantity": 0,
        "specialRequests": "No nuts please"
    }
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

MAX_QUANTITY = 999
MAX_SPECIAL_REQUESTS_LENGTH = 2000

_camel_config = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class OrderCreate(BaseModel):
    """
    What:  The validated body of POST /api/orders.
    Rules:
        - name: at least 2 characters
        - email: a valid address
        - phone: at least 10 characters
        - quantities: JSON integers from 0 to MAX_QUANTITY (no booleans or strings)
        - at least one item must be ordered
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    name: str = Field(description="Customer full name")
    email: EmailStr = Field(description="Customer e-mail address")
    phone: str = Field(description="Customer phone number")
    cake_quantity: int = Field(default=0, ge=0, le=MAX_QUANTITY, strict=True, description="Cakes requested")
    sorrel_quantity: int = Field(default=0, ge=0, le=MAX_QUANTITY, strict=True, description="Sorrel bottles requested")
    special_requests: Optional[str] = Field(
        default="",
        max_length=MAX_SPECIAL_REQUESTS_LENGTH,
        description="Allergies or delivery instructions",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if len(v) < 2:
            raise ValueError("Name must be at least 2 characters.")
        return v

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        if len(v) < 10:
            raise ValueError("Please enter a valid phone number.")
        return v

    @field_validator("special_requests")
    @classmethod
    def default_special_requests(cls, v: Optional[str]) -> str:
        return v or ""

    @model_validator(mode="after")
    def require_at_least_one_item(self) -> "OrderCreate":
        if self.cake_quantity <= 0 and self.sorrel_quantity <= 0:
            raise ValueError("You must order at least one item.")
        return self


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class OrderResponse(BaseModel):
    """
    What:  A stored order as returned by every /api/orders endpoint.
    Who:   The order form reads it to confirm what was received; the admin
           dashboard lists them.
    """

    model_config = _camel_config

    id: uuid.UUID = Field(description="Order identifier")
    name: str
    email: str
    phone: str
    cake_quantity: int
    sorrel_quantity: int
    special_requests: str = ""
    status: str = Field(description="Always 'pending'")
    created_at: datetime = Field(description="Submission time (UTC ISO 8601)")


class OrderSummaryRow(BaseModel):
    """One admin dashboard row: the order plus its display total."""

    model_config = _camel_config

    order: OrderResponse
    total: Decimal = Field(description="cake*15 + sorrel*5, in GBP")


class OrderDashboard(BaseModel):
    """
    What:  Everything the admin orders table renders.
    Fields:
        rows: orders newest first, each with its total
        order_count / grand_total: shown above the table
    """

    model_config = _camel_config

    rows: List[OrderSummaryRow]
    order_count: int
    grand_total: Decimal


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "Order not found",
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and storage status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    storage: str = Field(description="Order storage backend: database, memory")
    database: str = Field(description="Database connectivity: connected, disconnected, not_used")
    uptime_seconds: float = Field(description="Seconds since service started")
