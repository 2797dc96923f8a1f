"""Application service: Update Shipping use case.

Edits the destination of an existing order. Items and total are never
touched; ``updated_at`` is refreshed. The order lock is held from load
to commit so an edit cannot re-save an order deleted meanwhile.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order
from storefront.domain.repository.unit_of_work import UnitOfWork, order_key

logger = structlog.get_logger(__name__)


class UpdateShippingHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        order_id: int,
        address: str | None = None,
        city: str | None = None,
        zip_code: str | None = None,
        country: str | None = None,
    ) -> Order:
        with self._uow as uow, uow.lock(order_key(order_id)):
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError("Order", order_id)

            order.update_shipping(address=address, city=city, zip_code=zip_code, country=country)
            uow.orders.save(order)
            uow.commit()

        logger.info("Shipping updated", order_id=order_id, destination=str(order.shipping))
        return order
