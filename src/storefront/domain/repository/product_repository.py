"""Abstract repository for the Product aggregate (the inventory store).

Defined in the domain layer so the domain never depends on
infrastructure. Implementations carry no locking of their own: callers
serialize access through ``UnitOfWork.lock``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Persist a new product, assigning its ID if it has none."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist changes to an existing product."""

    def set_quantity(self, product_id: str, new_quantity: int) -> Product:
        """Overwrite the stock count of a product and persist it."""
        product = self.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        product.set_quantity(new_quantity)
        self.save(product)
        return product
