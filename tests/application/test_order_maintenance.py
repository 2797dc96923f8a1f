"""Tests for bare order creation, shipping edits and deletion."""

from datetime import datetime, timezone

import pytest

from storefront.application.create_order import CreateOrderHandler
from storefront.application.delete_order import DeleteOrderHandler
from storefront.application.update_order import UpdateShippingHandler
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money, Quantity, ShippingAddress
from tests.fakes import FakeUnitOfWork

CREATED = datetime(2020, 1, 2, tzinfo=timezone.utc)


def _setup() -> FakeUnitOfWork:
    order = Order.create(
        user_id=1,
        shipping=ShippingAddress("1 Main St", "Springfield", "12345", "US"),
        items=[OrderItem("1", "Widget", Quantity(2), Money.of("10.00"))],
        now=CREATED,
    )
    return FakeUnitOfWork(
        products=[Product(id="1", name="Widget", price=Money.of("10.00"), quantity=3)],
        users=[User(id=1, username="alice", email="alice@example.com", address="2 Elm St")],
        orders=[order],
    )


class TestCreateBareOrder:

    def test_ships_to_user_address(self):
        uow = _setup()
        order = CreateOrderHandler(uow).handle(1)

        stored = uow.orders.get_by_id(order.id)
        assert stored.shipping.address == "2 Elm St"
        assert stored.items == ()
        assert stored.total_amount == Money.zero()

    def test_unknown_user_rejected(self):
        with pytest.raises(EntityNotFoundError, match="User #5"):
            CreateOrderHandler(_setup()).handle(5)


class TestUpdateShipping:

    def test_updates_given_fields_and_timestamp(self):
        uow = _setup()

        UpdateShippingHandler(uow).handle(1, city="Shelbyville", country="CA")

        stored = uow.orders.get_by_id(1)
        assert stored.shipping == ShippingAddress("1 Main St", "Shelbyville", "12345", "CA")
        assert stored.updated_at > CREATED
        assert stored.created_at == CREATED
        assert stored.total_amount == Money.of("20.00")
        assert len(stored.items) == 1

    def test_unknown_order_rejected(self):
        with pytest.raises(EntityNotFoundError, match="Order #9"):
            UpdateShippingHandler(_setup()).handle(9, city="X")


class TestDeleteOrder:

    def test_delete_removes_order_and_items(self):
        uow = _setup()
        DeleteOrderHandler(uow).handle(1)
        assert uow.orders.get_by_id(1) is None
        assert uow.orders.list_all() == []

    def test_delete_does_not_restore_stock(self):
        uow = _setup()
        DeleteOrderHandler(uow).handle(1)
        assert uow.products.get_by_id("1").quantity == 3

    def test_delete_unknown_rejected(self):
        with pytest.raises(EntityNotFoundError):
            DeleteOrderHandler(_setup()).handle(9)
