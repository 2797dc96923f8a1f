"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from storefront.application.dto import InventoryLineView
from storefront.domain.repository.unit_of_work import UnitOfWork


class ShowInventoryHandler:

    def __init__(self, uow: UnitOfWork, low_stock_threshold: int = 5) -> None:
        self._uow = uow
        self._low_stock_threshold = low_stock_threshold

    def handle(
        self,
        low_stock_threshold: int | None = None,
        only_low_stock: bool = False,
    ) -> list[InventoryLineView]:
        threshold = (
            self._low_stock_threshold if low_stock_threshold is None else low_stock_threshold
        )
        with self._uow as uow:
            products = uow.products.list_all()

        lines = [
            InventoryLineView(
                product_id=product.id,
                product_name=product.name,
                quantity=product.quantity,
                low_stock=product.quantity < threshold,
                out_of_stock=product.quantity == 0,
            )
            for product in products
        ]
        if only_low_stock:
            lines = [line for line in lines if line.low_stock]
        return lines
