"""JSON-store-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from storefront.domain.model.product import Product, ProductImage, ProductSpecification
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

if TYPE_CHECKING:
    from storefront.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork

_COLLECTION = "products"


class JsonProductRepository(ProductRepository):

    def __init__(self, uow: JsonUnitOfWork) -> None:
        self._uow = uow

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        raw = self._uow.record(_COLLECTION, product_id)
        return self._to_domain(raw) if raw is not None else None

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._uow.records(_COLLECTION):
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._uow.records(_COLLECTION)]

    def add(self, product: Product) -> None:
        if not product.id:
            product.id = str(self._uow.next_id(_COLLECTION))
        self.save(product)

    def save(self, product: Product) -> None:
        self._uow.stage(_COLLECTION, product.id, self._to_raw(product))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "quantity": product.quantity,
            "images": [
                {"url": image.url, "is_main": image.is_main} for image in product.images
            ],
            "specifications": [
                {"name": spec.name, "value": spec.value}
                for spec in product.specifications
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            quantity=raw.get("quantity", 0),
            images=tuple(
                ProductImage(url=i["url"], is_main=i.get("is_main", False))
                for i in raw.get("images", [])
            ),
            specifications=tuple(
                ProductSpecification(name=s["name"], value=s["value"])
                for s in raw.get("specifications", [])
            ),
        )
