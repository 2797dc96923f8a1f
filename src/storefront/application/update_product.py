"""Application service: Update Product price use case."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWork, product_key


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: str, new_price: str) -> Product:
        """Update a product's catalog price.

        Cart lines and existing orders keep the price they captured.
        """
        with self._uow as uow, uow.lock(product_key(product_id)):
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product", product_id)

            product.update_price(Money.of(new_price))
            uow.products.save(product)
            uow.commit()

        return product
