"""Tests for catalog, stock and user maintenance handlers."""

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.add_user import AddUserHandler
from storefront.application.set_inventory import SetInventoryHandler
from storefront.application.show_inventory import ShowInventoryHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeUnitOfWork


def _catalog() -> FakeUnitOfWork:
    return FakeUnitOfWork(
        products=[
            Product(id="1", name="Widget", price=Money.of("10.00"), quantity=20),
            Product(id="2", name="Gadget", price=Money.of("2.50"), quantity=3),
            Product(id="3", name="Doohickey", price=Money.of("7.00"), quantity=0),
        ],
    )


class TestAddProduct:

    def test_adds_with_opening_stock(self):
        uow = _catalog()
        product = AddProductHandler(uow).handle("Sprocket", "4.25", quantity=8)

        stored = uow.products.get_by_id(product.id)
        assert stored.name == "Sprocket"
        assert stored.price == Money.of("4.25")
        assert stored.quantity == 8
        assert product.id == "4"

    def test_duplicate_name_rejected(self):
        with pytest.raises(ValidationError, match="already exists"):
            AddProductHandler(_catalog()).handle("widget", "1.00")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            AddProductHandler(_catalog()).handle("  ", "1.00")

    def test_negative_stock_rejected(self):
        uow = _catalog()
        with pytest.raises(ValidationError):
            AddProductHandler(uow).handle("Sprocket", "1.00", quantity=-1)
        assert uow.products.get_by_name("Sprocket") is None


class TestUpdateProduct:

    def test_updates_price(self):
        uow = _catalog()
        UpdateProductHandler(uow).handle("2", "3.00")
        assert uow.products.get_by_id("2").price == Money.of("3.00")

    def test_zero_price_rejected(self):
        uow = _catalog()
        with pytest.raises(ValidationError):
            UpdateProductHandler(uow).handle("2", "0")
        assert uow.products.get_by_id("2").price == Money.of("2.50")

    def test_unknown_product_rejected(self):
        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(_catalog()).handle("9", "1.00")


class TestInventory:

    def test_set_quantity(self):
        uow = _catalog()
        SetInventoryHandler(uow).handle("3", 12)
        assert uow.products.get_by_id("3").quantity == 12

    def test_set_negative_quantity_rejected(self):
        uow = _catalog()
        with pytest.raises(ValidationError):
            SetInventoryHandler(uow).handle("3", -2)
        assert uow.products.get_by_id("3").quantity == 0

    def test_set_unknown_product_rejected(self):
        with pytest.raises(EntityNotFoundError):
            SetInventoryHandler(_catalog()).handle("9", 1)

    def test_show_flags_low_and_empty_stock(self):
        lines = {line.product_name: line for line in ShowInventoryHandler(_catalog()).handle()}

        assert not lines["Widget"].low_stock
        assert lines["Gadget"].low_stock and not lines["Gadget"].out_of_stock
        assert lines["Doohickey"].low_stock and lines["Doohickey"].out_of_stock

    def test_show_only_low_stock_with_threshold(self):
        lines = ShowInventoryHandler(_catalog()).handle(low_stock_threshold=3, only_low_stock=True)
        assert [line.product_name for line in lines] == ["Doohickey"]


class TestAddUser:

    def test_adds_user(self):
        uow = FakeUnitOfWork()
        user = AddUserHandler(uow).handle("alice", "alice@example.com", address="2 Elm St")
        assert uow.users.get_by_email("alice@example.com").id == user.id

    def test_duplicate_email_rejected(self):
        uow = FakeUnitOfWork(users=[User(id=1, username="alice", email="alice@example.com")])
        with pytest.raises(ValidationError, match="already exists"):
            AddUserHandler(uow).handle("other", "ALICE@example.com")

    @pytest.mark.parametrize("username, email", [("", "a@example.com"), ("bob", "not-an-email")])
    def test_invalid_input_rejected(self, username, email):
        with pytest.raises(ValidationError):
            AddUserHandler(FakeUnitOfWork()).handle(username, email)
