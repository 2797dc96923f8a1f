"""Product aggregate — catalog entry and inventory store in one.

Products live independently of carts and orders, which reference them by
id only. Stock is mutated exclusively through the guarded operations
below so ``quantity`` can never go negative.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import InsufficientInventoryError, ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductImage:
    url: str
    is_main: bool = False


@dataclass(frozen=True)
class ProductSpecification:
    name: str
    value: str


@dataclass
class Product:
    """A product in the catalog together with its stock count.

    Invariant: ``quantity >= 0``.
    """

    id: str
    name: str
    price: Money
    quantity: int = 0
    images: tuple[ProductImage, ...] = field(default_factory=tuple)
    specifications: tuple[ProductSpecification, ...] = field(default_factory=tuple)

    def has_stock(self, requested: int) -> bool:
        return self.quantity >= requested

    def withdraw(self, requested: int) -> None:
        """Take *requested* units out of stock.

        Raises InsufficientInventoryError if that would leave the count
        below zero; the quantity is untouched in that case.
        """
        if requested <= 0:
            raise ValidationError("Withdraw quantity must be positive")
        if not self.has_stock(requested):
            raise InsufficientInventoryError(self.name, self.quantity, requested)
        self.quantity -= requested

    def restock(self, added: int) -> None:
        if added <= 0:
            raise ValidationError("Restock quantity must be positive")
        self.quantity += added

    def set_quantity(self, new_quantity: int) -> None:
        if new_quantity < 0:
            raise ValidationError(
                f"Stock for {self.name} cannot be negative, got {new_quantity}"
            )
        self.quantity = new_quantity

    def update_price(self, new_price: Money) -> None:
        """Change the catalog price.

        Cart lines and orders keep the price they captured earlier.
        """
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    @property
    def main_image(self) -> ProductImage | None:
        for image in self.images:
            if image.is_main:
                return image
        return self.images[0] if self.images else None
