"""Cart aggregate — a user's in-progress selection.

A cart is consumed exactly once: conversion into an order flips it to
inactive, after which it is read-only history.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import InvalidStateError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity

CART_NOT_ACTIVE = "cart not active"
CART_EMPTY = "cart empty"


@dataclass
class CartItem:
    """A product reference with the price it had when it was added."""

    product_id: str
    quantity: Quantity
    unit_price: Money  # snapshot, may diverge from the catalog price

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Cart:
    id: int | None
    user_id: int
    items: list[CartItem] = field(default_factory=list)
    active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Line management (active carts only) ---------------------------------

    def add_item(self, product: Product, quantity: Quantity) -> CartItem:
        """Add *quantity* of *product*, capturing its current price.

        Adding a product already in the cart grows the existing line and
        keeps that line's original price.
        """
        self._require_active()
        for item in self.items:
            if item.product_id == product.id:
                item.quantity = item.quantity + quantity
                return item
        item = CartItem(product_id=product.id, quantity=quantity, unit_price=product.price)
        self.items.append(item)
        return item

    def remove_item(self, product_id: str) -> None:
        self._require_active()
        remaining = [item for item in self.items if item.product_id != product_id]
        if len(remaining) == len(self.items):
            raise ValidationError(f"Product ID '{product_id}' is not in cart #{self.id}")
        self.items = remaining

    # --- Conversion ----------------------------------------------------------

    def ensure_convertible(self) -> None:
        """Reject carts that may not become an order.

        The active check comes first, so an inactive empty cart reports
        ``cart not active``.
        """
        self._require_active()
        if self.is_empty:
            raise InvalidStateError(
                CART_EMPTY, f"Cannot create order from empty cart #{self.id}"
            )

    def deactivate(self) -> None:
        self._require_active()
        self.active = False

    # --- Computed properties -------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity.value for item in self.items)

    @property
    def snapshot_total(self) -> Money:
        """Sum of line totals at the prices captured in the cart."""
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    def _require_active(self) -> None:
        if not self.active:
            raise InvalidStateError(
                CART_NOT_ACTIVE, f"Cart #{self.id} is not active"
            )
