"""Unit tests for the Order aggregate."""

from dataclasses import FrozenInstanceError
from datetime import date, datetime, timezone

import pytest

from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money, Quantity, ShippingAddress

NOW = datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)
SHIPPING = ShippingAddress("1 Main St", "Springfield", "12345", "US")


def _item(pid: str = "1", qty: int = 1, price: str = "10.00") -> OrderItem:
    return OrderItem(
        product_id=pid,
        product_name=f"P{pid}",
        quantity=Quantity(qty),
        unit_price=Money.of(price),
    )


class TestOrderCreation:

    def test_total_is_sum_of_line_totals(self):
        order = Order.create(1, SHIPPING, [_item("1", 2, "10"), _item("2", 1, "5")], now=NOW)
        assert order.total_amount == Money.of("25")

    def test_timestamps_and_order_date(self):
        order = Order.create(1, SHIPPING, [_item()], now=NOW)
        assert order.created_at == NOW
        assert order.updated_at == NOW
        assert order.order_date == date(2026, 3, 14)

    def test_id_is_none_until_persisted(self):
        assert Order.create(1, SHIPPING, [_item()]).id is None

    def test_empty_items_accepted_by_constructor(self):
        order = Order.create(1, SHIPPING, [], now=NOW)
        assert order.items == ()
        assert order.total_amount == Money.zero()

    def test_for_user_seeds_address(self):
        user = User(id=7, username="alice", email="a@example.com", address="2 Elm St")
        order = Order.for_user(user, now=NOW)
        assert order.user_id == 7
        assert order.shipping == ShippingAddress(address="2 Elm St")
        assert order.items == ()


class TestOrderItems:

    def test_items_are_frozen(self):
        order = Order.create(1, SHIPPING, [_item()], now=NOW)
        with pytest.raises(FrozenInstanceError):
            order.items[0].quantity = Quantity(5)

    def test_items_are_a_tuple(self):
        order = Order.create(1, SHIPPING, [_item()], now=NOW)
        assert isinstance(order.items, tuple)

    def test_line_total(self):
        assert _item(qty=3, price="15.00").line_total == Money.of("45.00")

    def test_contains_product(self):
        order = Order.create(1, SHIPPING, [_item("4")], now=NOW)
        assert order.contains_product("4")
        assert not order.contains_product("5")


class TestShippingUpdate:

    def test_partial_update_keeps_other_fields(self):
        order = Order.create(1, SHIPPING, [_item()], now=NOW)
        later = datetime(2026, 3, 15, tzinfo=timezone.utc)

        order.update_shipping(city="Shelbyville", now=later)

        assert order.shipping.city == "Shelbyville"
        assert order.shipping.address == "1 Main St"
        assert order.updated_at == later
        assert order.created_at == NOW

    def test_update_does_not_touch_total(self):
        order = Order.create(1, SHIPPING, [_item(qty=2)], now=NOW)
        order.update_shipping(country="CA")
        assert order.total_amount == Money.of("20.00")

    def test_calculate_total_amount_recomputes(self):
        order = Order(id=1, user_id=1, shipping=SHIPPING, items=(_item(qty=2),))
        assert order.total_amount == Money.zero()
        assert order.calculate_total_amount() == Money.of("20.00")
        assert order.total_amount == Money.of("20.00")
