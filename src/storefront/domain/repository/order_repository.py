"""Abstract repository for the Order aggregate.

Order items have no repository of their own: they are stored, loaded and
deleted only as part of their order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every committed order."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order, assigning its ID."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist changes to an existing order."""

    @abstractmethod
    def delete(self, order_id: int) -> None:
        """Remove an order together with its items."""
