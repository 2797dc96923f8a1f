"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWork, product_name_key

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, price: str, quantity: int = 0) -> Product:
        """Add a new product to the catalog with an opening stock count."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        with self._uow as uow, uow.lock(product_name_key(name)):
            if uow.products.get_by_name(name.strip()) is not None:
                raise ValidationError(f"Product '{name}' already exists")

            product = Product(id="", name=name.strip(), price=Money.of(price))
            product.set_quantity(quantity)
            uow.products.add(product)
            uow.commit()

        logger.info("Product added", product_id=product.id, quantity=quantity)
        return product
