"""Abstract repository for the Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_by_id(self, cart_id: int) -> Cart | None:
        """Return a cart by its ID, active or not, or None if not found."""

    @abstractmethod
    def list_by_user(self, user_id: int) -> list[Cart]:
        """Return every cart owned by a user."""

    @abstractmethod
    def add(self, cart: Cart) -> None:
        """Persist a new cart, assigning its ID."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist changes to an existing cart."""
