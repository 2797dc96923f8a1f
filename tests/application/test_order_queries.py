"""Tests for the read-only order lookups and filters."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from storefront.application.order_queries import OrderQueryHandler
from storefront.application.order_views import product_view
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.product import Product, ProductImage, ProductSpecification
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money, Quantity, ShippingAddress
from tests.fakes import FakeUnitOfWork


def _order(user_id: int, day: int, qty: int, price: str = "10.00", pid: str = "1") -> Order:
    return Order.create(
        user_id=user_id,
        shipping=ShippingAddress("1 Main St", "Springfield", "12345", "US"),
        items=[OrderItem(pid, "Widget", Quantity(qty), Money.of(price))],
        now=datetime(2026, 5, day, 12, 0, tzinfo=timezone.utc),
    )


def _handler(recent_limit: int = 10) -> OrderQueryHandler:
    users = [
        User(id=1, username="alice", email="alice@example.com"),
        User(id=2, username="bob", email="bob@example.com"),
    ]
    products = [
        Product(
            id="1",
            name="Widget",
            price=Money.of("12.00"),
            quantity=5,
            images=(ProductImage("side.png"), ProductImage("front.png", is_main=True)),
            specifications=(ProductSpecification("color", "red"),),
        ),
    ]
    orders = [
        _order(1, day=1, qty=1),  # $10
        _order(1, day=3, qty=5),  # $50
        _order(2, day=3, qty=2),  # $20
        _order(2, day=9, qty=1, pid="gone"),  # $10, product no longer in catalog
    ]
    uow = FakeUnitOfWork(products=products, users=users, orders=orders)
    return OrderQueryHandler(uow, recent_limit=recent_limit)


class TestLookups:

    def test_by_id_flattens_user_and_product(self):
        view = _handler().by_id(1)

        assert view.user.username == "alice"
        assert view.total_amount == "$10.00"
        item = view.items[0]
        assert item.product.name == "Widget"
        assert item.product.price == "$12.00"  # catalog price, line keeps its own
        assert item.unit_price == "$10.00"
        assert item.product.images == ["front.png", "side.png"]
        assert item.product.specifications == {"color": "red"}

    def test_main_image_listed_first_others_keep_order(self):
        product = Product(
            id="7",
            name="Gizmo",
            price=Money.of("1.00"),
            images=(ProductImage("a.png"), ProductImage("b.png", is_main=True), ProductImage("c.png")),
        )
        assert product_view(product).images == ["b.png", "a.png", "c.png"]

    def test_by_id_missing_product_falls_back_to_snapshot(self):
        view = _handler().by_id(4)
        assert view.items[0].product.id == "gone"
        assert view.items[0].product.images == []

    def test_by_id_unknown_rejected(self):
        with pytest.raises(EntityNotFoundError):
            _handler().by_id(99)

    def test_by_user_email(self):
        views = _handler().by_user_email("BOB@example.com")
        assert [v.id for v in views] == [3, 4]

    def test_by_unknown_email_is_empty(self):
        assert _handler().by_user_email("nobody@example.com") == []

    def test_all(self):
        assert len(_handler().all()) == 4

    def test_by_product(self):
        assert [v.id for v in _handler().by_product("gone")] == [4]


class TestFilters:

    def test_date_range_is_inclusive(self):
        views = _handler().by_date_range(date(2026, 5, 1), date(2026, 5, 3))
        assert [v.id for v in views] == [1, 2, 3]

    def test_filters_combine(self):
        views = _handler().by_filters(user_id=1, min_amount=Decimal("20"))
        assert [v.id for v in views] == [2]

    def test_min_amount_is_inclusive(self):
        views = _handler().by_filters(min_amount=Decimal("20.00"))
        assert [v.id for v in views] == [2, 3]

    def test_no_filters_returns_everything(self):
        assert len(_handler().by_filters()) == 4

    def test_open_ended_dates(self):
        assert [v.id for v in _handler().by_filters(start=date(2026, 5, 3))] == [2, 3, 4]
        assert [v.id for v in _handler().by_filters(end=date(2026, 5, 1))] == [1]


class TestRecentAndRevenue:

    def test_most_recent_newest_first(self):
        views = _handler().most_recent(2)
        assert [v.id for v in views] == [4, 2]

    def test_most_recent_uses_configured_default(self):
        assert len(_handler(recent_limit=3).most_recent()) == 3

    def test_revenue_by_date(self):
        lines = _handler().revenue_by_date(date(2026, 5, 1), date(2026, 5, 8))
        assert [(line.order_date, line.total) for line in lines] == [
            ("2026-05-01", "$10.00"),
            ("2026-05-03", "$70.00"),
        ]
