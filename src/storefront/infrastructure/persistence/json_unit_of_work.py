"""JSON-store-backed implementation of UnitOfWork.

Repositories read committed records from the store, overlaid with this
unit's own staged records, and write only into the staging area. The
staging area reaches the store in a single ``apply`` on commit.
"""

from __future__ import annotations

from contextlib import AbstractContextManager

import structlog

from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.infrastructure.persistence.json_cart_repository import JsonCartRepository
from storefront.infrastructure.persistence.json_order_repository import JsonOrderRepository
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_store import Changes, JsonDocumentStore
from storefront.infrastructure.persistence.json_user_repository import JsonUserRepository

logger = structlog.get_logger(__name__)


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store
        self._pending: Changes = {}
        self.products = JsonProductRepository(self)
        self.carts = JsonCartRepository(self)
        self.orders = JsonOrderRepository(self)
        self.users = JsonUserRepository(self)

    # --- UnitOfWork interface -------------------------------------------------

    def begin(self) -> None:
        self._pending = {}

    def commit(self) -> None:
        if self._pending:
            self._store.apply(self._pending)
        self._pending = {}

    def rollback(self) -> None:
        if self._pending:
            logger.debug(
                "Discarding staged changes",
                collections=sorted(self._pending),
            )
        self._pending = {}

    def lock(self, *keys: str) -> AbstractContextManager[None]:
        return self._store.locks.hold(*keys)

    # --- Used by the repositories ---------------------------------------------

    def records(self, collection: str) -> list[dict]:
        """Committed records with this unit's staged changes applied."""
        staged = self._pending.get(collection, {})
        result: list[dict] = []
        seen: set[str] = set()
        for raw in self._store.read(collection):
            key = str(raw["id"])
            if key in staged:
                seen.add(key)
                if staged[key] is not None:
                    result.append(staged[key])  # type: ignore[arg-type]
            else:
                result.append(raw)
        for key, raw in staged.items():
            if key not in seen and raw is not None:
                result.append(raw)
        return result

    def record(self, collection: str, key: object) -> dict | None:
        staged = self._pending.get(collection, {})
        if str(key) in staged:
            return staged[str(key)]
        for raw in self._store.read(collection):
            if str(raw["id"]) == str(key):
                return raw
        return None

    def stage(self, collection: str, key: object, raw: dict | None) -> None:
        self._pending.setdefault(collection, {})[str(key)] = raw

    def next_id(self, collection: str) -> int:
        return self._store.next_id(collection)
