"""Unit of Work — the transactional boundary around the repositories.

Writes made through the repositories are staged and only become visible
to other units of work on ``commit()``. Leaving the ``with`` block
discards whatever was not committed, so a failure half-way through an
operation never leaves partial state behind.

Usage::

    with uow:
        with uow.lock(f"cart:{cart_id}"):
            cart = uow.carts.get_by_id(cart_id)
            ...
            uow.commit()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


def cart_key(cart_id: int) -> str:
    return f"cart:{cart_id}"


def product_key(product_id: str) -> str:
    return f"product:{product_id}"


def order_key(order_id: int) -> str:
    return f"order:{order_id}"


def product_name_key(name: str) -> str:
    return f"product-name:{name.strip().lower()}"


def user_email_key(email: str) -> str:
    return f"user-email:{email.strip().lower()}"


class UnitOfWork(ABC):

    products: ProductRepository
    carts: CartRepository
    orders: OrderRepository
    users: UserRepository

    def __enter__(self) -> UnitOfWork:
        self.begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # After a commit there is nothing staged, so this is a no-op.
        self.rollback()

    @abstractmethod
    def begin(self) -> None:
        """Start a fresh set of staged changes."""

    @abstractmethod
    def commit(self) -> None:
        """Apply every staged change at once."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every staged change."""

    @abstractmethod
    def lock(self, *keys: str) -> AbstractContextManager[None]:
        """Hold exclusive locks on the given aggregate keys for a block.

        Keys are acquired in sorted order. Locks are re-entrant for the
        holding thread.
        """
