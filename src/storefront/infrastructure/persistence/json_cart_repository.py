"""JSON-store-backed implementation of CartRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.cart_repository import CartRepository

if TYPE_CHECKING:
    from storefront.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork

_COLLECTION = "carts"


class JsonCartRepository(CartRepository):

    def __init__(self, uow: JsonUnitOfWork) -> None:
        self._uow = uow

    def get_by_id(self, cart_id: int) -> Cart | None:
        raw = self._uow.record(_COLLECTION, cart_id)
        return self._to_domain(raw) if raw is not None else None

    def list_by_user(self, user_id: int) -> list[Cart]:
        return [
            self._to_domain(raw)
            for raw in self._uow.records(_COLLECTION)
            if raw["user_id"] == user_id
        ]

    def add(self, cart: Cart) -> None:
        if cart.id is None:
            cart.id = self._uow.next_id(_COLLECTION)
        self.save(cart)

    def save(self, cart: Cart) -> None:
        self._uow.stage(_COLLECTION, cart.id, self._to_raw(cart))

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "id": cart.id,
            "user_id": cart.user_id,
            "active": cart.active,
            "created_at": cart.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in cart.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        return Cart(
            id=raw["id"],
            user_id=raw["user_id"],
            active=raw["active"],
            created_at=datetime.fromisoformat(raw["created_at"]),
            items=[
                CartItem(
                    product_id=i["product_id"],
                    quantity=Quantity(i["quantity"]),
                    unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
                )
                for i in raw["items"]
            ],
        )
