"""Application service: Set Inventory use case."""

from __future__ import annotations

import structlog

from storefront.domain.model.product import Product
from storefront.domain.repository.unit_of_work import UnitOfWork, product_key

logger = structlog.get_logger(__name__)


class SetInventoryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: str, quantity: int) -> Product:
        """Overwrite the stock count of a product."""
        with self._uow as uow, uow.lock(product_key(product_id)):
            product = uow.products.set_quantity(product_id, quantity)
            uow.commit()

        logger.info("Stock set", product_id=product_id, quantity=quantity)
        return product
