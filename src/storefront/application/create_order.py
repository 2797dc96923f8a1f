"""Application service: Create Order use case (outside checkout).

Places a bare order for a user, with no lines and the shipping address
taken from the user's profile. Stock is not involved.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int) -> Order:
        with self._uow as uow:
            user = uow.users.get_by_id(user_id)
            if user is None:
                raise EntityNotFoundError("User", user_id)

            order = Order.for_user(user)
            uow.orders.add(order)
            uow.commit()

        logger.info("Bare order created", order_id=order.id, user_id=user_id)
        return order
