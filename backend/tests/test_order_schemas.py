"""
Bev's Bakery Backend - Order Schema and Catalog Tests
======================================================

What:  OrderCreate validation rules and the catalog's pricing helpers.
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from bakery.schemas.order import MAX_QUANTITY, OrderCreate
from bakery.services.catalog import CAKE, PRODUCTS, SORREL, format_price, order_total


def valid_payload(**overrides):
    payload = {
        "name": "Beverley Johnson",
        "email": "bev@example.com",
        "phone": "07852220010",
        "cakeQuantity": 1,
        "sorrelQuantity": 0,
    }
    payload.update(overrides)
    return payload


class TestOrderCreate:

    def test_camel_case_and_snake_case_accepted(self):
        camel = OrderCreate(**valid_payload(cakeQuantity=2))
        snake = OrderCreate(
            name="Beverley Johnson",
            email="bev@example.com",
            phone="07852220010",
            cake_quantity=2,
        )

        assert camel.cake_quantity == snake.cake_quantity == 2

    def test_whitespace_is_stripped_before_length_checks(self):
        with pytest.raises(ValidationError, match="Name must be at least 2 characters."):
            OrderCreate(**valid_payload(name="  B  "))

    def test_missing_special_requests_becomes_empty(self):
        assert OrderCreate(**valid_payload(specialRequests=None)).special_requests == ""

    def test_one_sorrel_is_enough(self):
        order = OrderCreate(**valid_payload(cakeQuantity=0, sorrelQuantity=1))

        assert order.sorrel_quantity == 1

    def test_no_items(self):
        with pytest.raises(ValidationError, match="You must order at least one item."):
            OrderCreate(**valid_payload(cakeQuantity=0, sorrelQuantity=0))

    def test_short_phone(self):
        with pytest.raises(ValidationError, match="Please enter a valid phone number."):
            OrderCreate(**valid_payload(phone="12345"))

    def test_quantity_limit(self):
        OrderCreate(**valid_payload(cakeQuantity=MAX_QUANTITY))
        with pytest.raises(ValidationError):
            OrderCreate(**valid_payload(cakeQuantity=MAX_QUANTITY + 1))

    def test_fractional_quantity_rejected(self):
        with pytest.raises(ValidationError):
            OrderCreate(**valid_payload(cakeQuantity=1.5))

    @pytest.mark.parametrize("value", [True, "3", 2.0])
    def test_quantity_must_be_a_real_integer(self, value):
        with pytest.raises(ValidationError) as exc_info:
            OrderCreate(**valid_payload(cakeQuantity=0, sorrelQuantity=value))

        assert exc_info.value.errors()[0]["loc"] == ("sorrelQuantity",)

    def test_quantities_from_json(self):
        order = OrderCreate.model_validate_json(
            '{"name": "Beverley Johnson", "email": "bev@example.com",'
            ' "phone": "07852220010", "cakeQuantity": 2, "sorrelQuantity": 0}'
        )

        assert order.cake_quantity == 2

    def test_boolean_quantity_from_json_rejected(self):
        with pytest.raises(ValidationError):
            OrderCreate.model_validate_json(
                '{"name": "Beverley Johnson", "email": "bev@example.com",'
                ' "phone": "07852220010", "cakeQuantity": true}'
            )


class TestCatalog:

    def test_prices(self):
        assert CAKE.price == Decimal("15.00")
        assert SORREL.price == Decimal("5.00")
        assert list(PRODUCTS) == ["cake", "sorrel"]

    @pytest.mark.parametrize(
        "cake,sorrel,expected",
        [(1, 0, "15.00"), (0, 3, "15.00"), (2, 1, "35.00"), (0, 0, "0.00")],
    )
    def test_order_total(self, cake, sorrel, expected):
        assert order_total(cake, sorrel) == Decimal(expected)

    def test_format_price(self):
        assert format_price(Decimal("55")) == "£55.00"
