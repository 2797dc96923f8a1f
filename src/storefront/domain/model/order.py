"""Order aggregate — the committed result of a checkout.

The Order is an aggregate root that owns its line items. Items are a
tuple of frozen records fixed at creation: nothing adds, removes or
edits them afterwards, and they are deleted only together with the order.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone

from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money, Quantity, ShippingAddress


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OrderItem:
    """Frozen copy of a cart line: product reference, quantity, price."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # copied from the cart item, never re-read from the catalog

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.create()`` for new orders. The ``__init__`` stays plain so
    the repository can reconstitute persisted orders as they were stored.
    """

    id: int | None
    user_id: int
    shipping: ShippingAddress
    items: tuple[OrderItem, ...] = ()
    total_amount: Money = field(default_factory=Money.zero)
    order_date: date = field(default_factory=lambda: _utcnow().date())
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(
        user_id: int,
        shipping: ShippingAddress,
        items: list[OrderItem],
        now: datetime | None = None,
    ) -> Order:
        """Build a new order and compute its total.

        Pure construction: no inventory is touched. An empty item list is
        accepted here; refusing empty carts is the checkout's job.
        """
        now = now or _utcnow()
        order = Order(
            id=None,
            user_id=user_id,
            shipping=shipping,
            items=tuple(items),
            order_date=now.date(),
            created_at=now,
            updated_at=now,
        )
        order.calculate_total_amount()
        return order

    @staticmethod
    def for_user(user: User, now: datetime | None = None) -> Order:
        """A bare order shipping to the user's profile address."""
        return Order.create(
            user_id=user.id,  # type: ignore[arg-type]
            shipping=ShippingAddress(address=user.address),
            items=[],
            now=now,
        )

    # --- Behaviour ------------------------------------------------------------

    def calculate_total_amount(self) -> Money:
        total = Money.zero()
        for item in self.items:
            total = total + item.line_total
        self.total_amount = total
        return total

    def update_shipping(
        self,
        address: str | None = None,
        city: str | None = None,
        zip_code: str | None = None,
        country: str | None = None,
        now: datetime | None = None,
    ) -> None:
        """Overwrite the given shipping fields; ``None`` keeps the old value."""
        changes = {
            key: value
            for key, value in (
                ("address", address),
                ("city", city),
                ("zip_code", zip_code),
                ("country", country),
            )
            if value is not None
        }
        self.shipping = replace(self.shipping, **changes)
        self.updated_at = now or _utcnow()

    # --- Computed properties --------------------------------------------------

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity.value for item in self.items)

    def contains_product(self, product_id: str) -> bool:
        return any(item.product_id == product_id for item in self.items)
