"""Single JSON document holding every collection of the store.

Layout::

    {
      "sequences": {"orders": 3, ...},
      "users": [...], "products": [...], "carts": [...], "orders": [...]
    }

Keeping everything in one file lets a commit replace it in one rename,
so changes to products, carts and orders land together or not at all.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path

import structlog

from storefront.infrastructure.persistence.locking import KeyedLock

logger = structlog.get_logger(__name__)

COLLECTIONS = ("users", "products", "carts", "orders")

# collection -> record key -> raw record, or None for a deletion
Changes = dict[str, dict[str, "dict | None"]]


class JsonDocumentStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._io_lock = threading.RLock()
        self.locks = KeyedLock()
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- Reads ----------------------------------------------------------------

    def read(self, collection: str) -> list[dict]:
        with self._io_lock:
            return self._load()[collection]

    # --- Writes ---------------------------------------------------------------

    def apply(self, changes: Changes) -> None:
        """Apply upserts and deletions across collections in one write."""
        with self._io_lock:
            document = self._load()
            for collection, staged in changes.items():
                records = document[collection]
                index = {str(raw["id"]): i for i, raw in enumerate(records)}
                deleted: set[str] = set()
                for key, raw in staged.items():
                    if raw is None:
                        deleted.add(key)
                    elif key in index:
                        records[index[key]] = raw
                    else:
                        index[key] = len(records)
                        records.append(raw)
                if deleted:
                    document[collection] = [
                        raw for raw in records if str(raw["id"]) not in deleted
                    ]
            self._persist(document)
        logger.debug(
            "Store committed",
            path=str(self._file_path),
            changes={name: len(staged) for name, staged in changes.items()},
        )

    def next_id(self, collection: str) -> int:
        """Draw the next ID of a collection.

        The sequence advances immediately, so IDs drawn by a unit of work
        that later rolls back are simply skipped.
        """
        with self._io_lock:
            document = self._load()
            value = document["sequences"].get(collection, 0) + 1
            document["sequences"][collection] = value
            self._persist(document)
            return value

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict:
        document = json.loads(self._file_path.read_text(encoding="utf-8"))
        document.setdefault("sequences", {})
        for collection in COLLECTIONS:
            document.setdefault(collection, [])
        return document

    def _persist(self, document: dict) -> None:
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        tmp_path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
        tmp_path.replace(self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            empty = {"sequences": {}, **{name: [] for name in COLLECTIONS}}
            self._persist(empty)
