"""JSON document store backing users, sessions, meal plans and shopping lists.

The whole store is one JSON document::

    {
      "users": [...], "sessions": [...], "meal_plans": [...], "shopping_lists": [...],
      "next_ids": {"users": 1, "meal_plans": 1, "shopping_lists": 1}
    }

All writes go through ``transaction()``: the document is loaded, handed to the
caller for mutation and written back atomically only when the block exits
without an exception. A process-wide lock serializes transactions, so two
generation requests for the same week cannot interleave inside one process.
"""
import json
import logging
import os
import shutil
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

TABLES = ("users", "sessions", "meal_plans", "shopping_lists")


def _empty_document() -> Dict[str, Any]:
    doc: Dict[str, Any] = {table: [] for table in TABLES}
    doc["next_ids"] = {table: 1 for table in TABLES if table != "sessions"}
    return doc


class JsonStore:
    def __init__(self, path):
        self.path = Path(path)
        self._lock = threading.RLock()
        self._active = None  # document of the transaction in progress

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return _empty_document()
        with open(self.path, "r", encoding="utf-8") as f:
            doc = json.load(f) or {}
        for table in TABLES:
            doc.setdefault(table, [])
        next_ids = doc.setdefault("next_ids", {})
        for table, start in _empty_document()["next_ids"].items():
            next_ids.setdefault(table, start)
        return doc

    def _atomic_write(self, doc: Dict[str, Any]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".store_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(doc, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def read(self) -> Dict[str, Any]:
        """Current document; inside a transaction this is the uncommitted one."""
        with self._lock:
            if self._active is not None:
                return self._active
            return self._read()

    @contextmanager
    def transaction(self):
        """Yield the document for mutation; persist it only if the block succeeds.

        Nested transactions share the outer document and only the outermost one writes.
        """
        with self._lock:
            if self._active is not None:
                yield self._active
                return
            doc = self._read()
            self._active = doc
            try:
                yield doc
            except Exception:
                logger.warning("Transaction on %s rolled back", self.path.name)
                raise
            else:
                self._atomic_write(doc)
            finally:
                self._active = None

    @staticmethod
    def next_id(doc: Dict[str, Any], table: str) -> int:
        """Allocate the next integer id for a table inside a transaction."""
        value = doc["next_ids"][table]
        doc["next_ids"][table] = value + 1
        return value


__all__ = ['JsonStore', 'TABLES']
