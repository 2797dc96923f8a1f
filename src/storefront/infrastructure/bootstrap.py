"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from storefront.infrastructure.config import get_settings
from storefront.infrastructure.persistence.json_store import JsonDocumentStore
from storefront.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


@lru_cache(maxsize=None)
def _store_for(path: Path) -> JsonDocumentStore:
    # One store per file so every unit of work in the process shares its locks.
    return JsonDocumentStore(path)


def document_store() -> JsonDocumentStore:
    return _store_for(get_settings().store_path.resolve())


def unit_of_work() -> JsonUnitOfWork:
    return JsonUnitOfWork(document_store())
