"""Application services: cart lifecycle before checkout.

Open a cart, add and remove lines, show it. Lines capture the product's
price at the moment they are added.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartLineView, CartView
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.unit_of_work import UnitOfWork, cart_key

logger = structlog.get_logger(__name__)


def _load_cart(uow: UnitOfWork, cart_id: int) -> Cart:
    cart = uow.carts.get_by_id(cart_id)
    if cart is None:
        raise EntityNotFoundError("Cart", cart_id)
    return cart


def to_cart_view(cart: Cart) -> CartView:
    return CartView(
        id=cart.id,  # type: ignore[arg-type]
        user_id=cart.user_id,
        active=cart.active,
        items=[
            CartLineView(
                product_id=item.product_id,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in cart.items
        ],
        total=str(cart.snapshot_total),
    )


class OpenCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int) -> Cart:
        with self._uow as uow:
            if uow.users.get_by_id(user_id) is None:
                raise EntityNotFoundError("User", user_id)
            cart = Cart(id=None, user_id=user_id)
            uow.carts.add(cart)
            uow.commit()

        logger.info("Cart opened", cart_id=cart.id, user_id=user_id)
        return cart


class AddCartItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, cart_id: int, product_id: str, quantity: int) -> Cart:
        with self._uow as uow, uow.lock(cart_key(cart_id)):
            cart = _load_cart(uow, cart_id)
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product", product_id)

            cart.add_item(product, Quantity(quantity))
            uow.carts.save(cart)
            uow.commit()

        return cart


class RemoveCartItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, cart_id: int, product_id: str) -> Cart:
        with self._uow as uow, uow.lock(cart_key(cart_id)):
            cart = _load_cart(uow, cart_id)
            cart.remove_item(product_id)
            uow.carts.save(cart)
            uow.commit()

        return cart


class ShowCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, cart_id: int) -> CartView:
        with self._uow as uow:
            return to_cart_view(_load_cart(uow, cart_id))
