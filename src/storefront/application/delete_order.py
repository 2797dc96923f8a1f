"""Application service: Delete Order use case.

The order's items go with it. Stock withdrawn at checkout stays
withdrawn. Holds the same order lock as shipping edits.
"""

from __future__ import annotations

import structlog

from storefront.domain.repository.unit_of_work import UnitOfWork, order_key

logger = structlog.get_logger(__name__)


class DeleteOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> None:
        with self._uow as uow, uow.lock(order_key(order_id)):
            uow.orders.delete(order_id)
            uow.commit()

        logger.info("Order deleted", order_id=order_id)
