"""Unit tests for the Order aggregate and its entities."""

from decimal import Decimal

import pytest

from orderentry.domain.exceptions import ValidationError
from orderentry.domain.model.order import Order, OrderItem
from orderentry.domain.model.product import Product
from orderentry.domain.model.value_objects import Money, Quantity


def _product(sku: str = "WID-1", price: str = "15.00") -> Product:
    return Product(id=sku, sku=sku, name=f"Product {sku}", price=Money.of(price))


class TestOrderItem:

    def test_line_total(self):
        item = OrderItem(product=_product(price="2.50"), quantity=Quantity(4))
        assert item.line_total == Money.of("10.00")

    def test_sku_comes_from_product(self):
        item = OrderItem(product=_product("GAD-2"), quantity=Quantity(1))
        assert item.sku == "GAD-2"


class TestOrderNetTotal:

    def test_empty_order_totals_zero(self):
        assert Order(customer_id=42).net_total == Money.zero()

    def test_sum_of_line_items(self):
        order = Order(customer_id=42)
        order.add_item(_product("WID-1", "15.00"), 3)
        order.add_item(_product("GAD-2", "25.00"), 5)
        assert order.net_total == Money.of("170.00")

    @pytest.mark.parametrize(
        "lines",
        [
            [("0.00", 1)],
            [("0.01", 3), ("0.02", 7)],
            [("19.99", 3), ("0.10", 10), ("1234.5678", 2)],
        ],
    )
    def test_matches_independent_decimal_sum(self, lines):
        order = Order(customer_id=1)
        for i, (price, qty) in enumerate(lines):
            order.add_item(_product(f"SKU-{i}", price), qty)
        expected = sum(Decimal(price) * qty for price, qty in lines)
        assert order.net_total.amount == expected


class TestOrderItems:

    def test_add_item_rejects_non_positive_quantity(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Order(customer_id=42).add_item(_product(), 0)

    def test_skus_keep_duplicates_in_order(self):
        order = Order(customer_id=42)
        order.add_item(_product("A"), 1)
        order.add_item(_product("B"), 1)
        order.add_item(_product("A"), 2)
        assert order.skus == ["A", "B", "A"]

    def test_product_requires_sku(self):
        with pytest.raises(ValidationError, match="SKU is required"):
            Product(id="1", sku=" ", name="Blank", price=Money.of("1"))
