"""
Bev's Bakery Backend - Product Catalog
=======================================

What:  The two products the bakery sells, their prices, and the order total.
Who:   The marketing page renders the product cards from PRODUCTS; the admin
       dashboard shows order_total() for each order.

Prices are Decimal so totals never pick up float rounding (0.1 + 0.2).
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Tuple

CURRENCY_SYMBOL = "£"
_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Product:
    """A product card on the marketing page and a line on the order form."""
    key: str
    title: str
    form_label: str
    form_hint: str
    description: str
    price: Decimal
    tags: Tuple[str, ...] = field(default_factory=tuple)


CAKE = Product(
    key="cake",
    title="Christmas Fruit Cake",
    form_label="Christmas Fruit Cake",
    form_hint="8-inch, Rum Soaked",
    description=(
        "Our signature 8-inch cake. Fruits soaked in Red Label Wine and White "
        "Overproof Rum for months, baked slow and low for that perfect moist, "
        "dark texture."
    ),
    price=Decimal("15.00"),
    tags=("8-inch", "Rum Soaked", "Traditional"),
)

SORREL = Product(
    key="sorrel",
    title="Jamaican Sorrel",
    form_label="Bottle of Sorrel",
    form_hint="750ml, Spiced",
    description=(
        "Fresh sorrel petals brewed with ginger, pimento, and a hint of lime. "
        "A deep red, refreshing holiday classic served in a premium glass bottle."
    ),
    price=Decimal("5.00"),
    tags=("750ml", "Fresh Brewed", "Spiced"),
)

PRODUCTS: Dict[str, Product] = {CAKE.key: CAKE, SORREL.key: SORREL}


def order_total(cake_quantity: int, sorrel_quantity: int) -> Decimal:
    """Display total for an order: cake*15 + sorrel*5, rounded to pence."""
    total = CAKE.price * cake_quantity + SORREL.price * sorrel_quantity
    return total.quantize(_CENTS)


def format_price(amount: Decimal) -> str:
    """Render an amount the way the site shows it, e.g. £15.00."""
    return f"{CURRENCY_SYMBOL}{amount.quantize(_CENTS)}"
