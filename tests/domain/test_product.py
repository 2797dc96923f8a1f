"""Unit tests for the Product aggregate's guarded stock operations."""

import pytest

from storefront.domain.exceptions import InsufficientInventoryError, ValidationError
from storefront.domain.model.product import Product, ProductImage
from storefront.domain.model.value_objects import Money


def _product(quantity: int = 10) -> Product:
    return Product(id="1", name="Widget", price=Money.of("15.00"), quantity=quantity)


class TestWithdraw:

    def test_withdraw_reduces_stock(self):
        product = _product(10)
        product.withdraw(4)
        assert product.quantity == 6

    def test_withdraw_everything(self):
        product = _product(3)
        product.withdraw(3)
        assert product.quantity == 0

    def test_withdraw_more_than_stock_rejected_and_untouched(self):
        product = _product(2)
        with pytest.raises(InsufficientInventoryError) as exc_info:
            product.withdraw(3)
        assert exc_info.value.product_name == "Widget"
        assert exc_info.value.available == 2
        assert exc_info.value.requested == 3
        assert product.quantity == 2

    def test_withdraw_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _product().withdraw(0)


class TestRestockAndSet:

    def test_restock_adds(self):
        product = _product(1)
        product.restock(4)
        assert product.quantity == 5

    def test_restock_negative_rejected(self):
        with pytest.raises(ValidationError):
            _product().restock(-1)

    def test_set_quantity_to_zero_allowed(self):
        product = _product(5)
        product.set_quantity(0)
        assert product.quantity == 0

    def test_set_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _product().set_quantity(-1)


class TestPriceAndImages:

    def test_update_price(self):
        product = _product()
        product.update_price(Money.of("20.00"))
        assert product.price == Money.of("20.00")

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            _product().update_price(Money.of("0"))

    def test_main_image_prefers_flagged_image(self):
        product = _product()
        product.images = (ProductImage("a.png"), ProductImage("b.png", is_main=True))
        assert product.main_image.url == "b.png"

    def test_main_image_falls_back_to_first(self):
        product = _product()
        product.images = (ProductImage("a.png"),)
        assert product.main_image.url == "a.png"
        assert _product().main_image is None
