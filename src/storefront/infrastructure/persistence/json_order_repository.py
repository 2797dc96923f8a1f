"""JSON-store-backed implementation of OrderRepository.

Order items are embedded in the order record; deleting the record is
the only way they go away.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.value_objects import Money, Quantity, ShippingAddress
from storefront.domain.repository.order_repository import OrderRepository

if TYPE_CHECKING:
    from storefront.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork

_COLLECTION = "orders"


class JsonOrderRepository(OrderRepository):

    def __init__(self, uow: JsonUnitOfWork) -> None:
        self._uow = uow

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        raw = self._uow.record(_COLLECTION, order_id)
        return self._to_domain(raw) if raw is not None else None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._uow.records(_COLLECTION)]

    def add(self, order: Order) -> None:
        if order.id is None:
            order.id = self._uow.next_id(_COLLECTION)
        self.save(order)

    def save(self, order: Order) -> None:
        self._uow.stage(_COLLECTION, order.id, self._to_raw(order))

    def delete(self, order_id: int) -> None:
        if self._uow.record(_COLLECTION, order_id) is None:
            raise EntityNotFoundError("Order", order_id)
        self._uow.stage(_COLLECTION, order_id, None)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "order_date": order.order_date.isoformat(),
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
            "shipping_address": order.shipping.address,
            "shipping_city": order.shipping.city,
            "shipping_zip_code": order.shipping.zip_code,
            "shipping_country": order.shipping.country,
            "total_amount": str(order.total_amount.amount),
            "currency": order.total_amount.currency,
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = tuple(
            OrderItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
            )
            for i in raw["items"]
        )
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            shipping=ShippingAddress(
                address=raw.get("shipping_address"),
                city=raw.get("shipping_city"),
                zip_code=raw.get("shipping_zip_code"),
                country=raw.get("shipping_country"),
            ),
            items=items,
            total_amount=Money(Decimal(raw["total_amount"]), raw.get("currency", "USD")),
            order_date=date.fromisoformat(raw["order_date"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
