"""Domain service: stock checks and withdrawals for cart conversion.

Coordinates the Cart and Product aggregates. The work is split into two
explicit passes over the same ordered cart lines:

  Pass 1, ``check_availability``: load every product and confirm the
           stock covers the request. Fails before anything is mutated.
  Pass 2, ``withdraw_stock``: re-read each product, withdraw (which
           re-checks), stage the new quantity and build the order line.

The caller must hold the product locks across both passes and the commit.
"""

from __future__ import annotations

from collections import defaultdict

from storefront.domain.exceptions import EntityNotFoundError, InsufficientInventoryError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import OrderItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class OrderConversionService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def check_availability(self, cart: Cart) -> Money:
        """Validate stock for every cart line, in cart order.

        Lines naming the same product are checked against their running
        sum, so two lines cannot each pass on the same units. Returns the
        cart's snapshot total for the caller to compare with the order.
        """
        requested: dict[str, int] = defaultdict(int)

        for item in cart.items:
            product = self._load(item.product_id)
            requested[product.id] += item.quantity.value
            if not product.has_stock(requested[product.id]):
                raise InsufficientInventoryError(
                    product.name, product.quantity, requested[product.id]
                )

        return cart.snapshot_total

    def withdraw_stock(self, cart: Cart) -> list[OrderItem]:
        """Take each line's quantity out of stock and return the order lines."""
        order_items: list[OrderItem] = []

        for item in cart.items:
            product = self._load(item.product_id)
            product.withdraw(item.quantity.value)
            self._product_repo.save(product)
            order_items.append(
                OrderItem(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                )
            )

        return order_items

    def _load(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return product
