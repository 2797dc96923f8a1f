"""Application service: Convert Cart to Order (checkout).

The single authoritative transition from cart to order. Everything
happens inside one unit of work:

1. Load the cart under its lock and check it is active and non-empty.
2. Lock every product in the cart and validate stock for all lines.
3. Withdraw stock line by line (re-checking) and build the order lines.
4. Build the order, verify it against the cart, deactivate the cart.
5. Commit once.

A failure at any step leaves the unit of work uncommitted, so stock,
orders and the cart are exactly as they were.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import (
    ConversionIntegrityError,
    DomainException,
    EntityNotFoundError,
)
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import Money, ShippingAddress
from storefront.domain.repository.unit_of_work import UnitOfWork, cart_key, product_key
from storefront.domain.service.order_conversion_service import OrderConversionService

logger = structlog.get_logger(__name__)


class ConvertCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        cart_id: int,
        shipping_address: str,
        shipping_city: str,
        shipping_zip_code: str,
        shipping_country: str,
    ) -> Order:
        shipping = ShippingAddress(
            address=shipping_address,
            city=shipping_city,
            zip_code=shipping_zip_code,
            country=shipping_country,
        )
        log = logger.bind(cart_id=cart_id)

        with self._uow as uow, uow.lock(cart_key(cart_id)):
            try:
                order = self._convert(uow, cart_id, shipping)
            except DomainException as exc:
                log.warning("Cart conversion rejected", error=type(exc).__name__, reason=str(exc))
                raise

        log.info(
            "Cart converted",
            order_id=order.id,
            total=str(order.total_amount),
            lines=len(order.items),
        )
        return order

    def _convert(self, uow: UnitOfWork, cart_id: int, shipping: ShippingAddress) -> Order:
        cart = uow.carts.get_by_id(cart_id)
        if cart is None:
            raise EntityNotFoundError("Cart", cart_id)
        cart.ensure_convertible()

        svc = OrderConversionService(uow.products)
        product_keys = [product_key(item.product_id) for item in cart.items]

        with uow.lock(*product_keys):
            # Pass 1: nothing is staged until every line has been checked.
            expected_total = svc.check_availability(cart)

            # Pass 2: withdraw and build the order lines.
            order_items = svc.withdraw_stock(cart)
            order = Order.create(user_id=cart.user_id, shipping=shipping, items=order_items)

            self._verify(cart, order, expected_total)

            cart.deactivate()
            uow.orders.add(order)
            uow.carts.save(cart)
            uow.commit()

        return order

    @staticmethod
    def _verify(cart: Cart, order: Order, expected_total: Money) -> None:
        """Pre-commit check that the order accounts for the cart exactly."""
        if order.total_quantity != cart.total_quantity:
            raise ConversionIntegrityError(
                f"Cart #{cart.id} holds {cart.total_quantity} units "
                f"but order lines withdrew {order.total_quantity}"
            )
        if order.total_amount != expected_total:
            raise ConversionIntegrityError(
                f"Order total {order.total_amount} diverged from "
                f"cart #{cart.id} total {expected_total}"
            )
