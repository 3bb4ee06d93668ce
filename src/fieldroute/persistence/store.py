"""Key-value persistence backends for field-service collections."""

from __future__ import annotations

import copy
import json
import logging
import threading
from enum import Enum
from pathlib import Path
from typing import Any, Protocol

from ..config import settings

logger = logging.getLogger(__name__)


class Collection(str, Enum):
    USERS = "users"
    ORDERS = "orders"
    TICKETS = "tickets"
    REPORTS = "reports"
    TIME_RECORDS = "time_records"
    AUDIT_LOGS = "audit_logs"
    INVENTORY = "inventory"


class KeyValueStore(Protocol):
    """Collections keyed by name. ``lock`` is held by callers across a read-modify-write."""

    lock: threading.RLock

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> None: ...

    def keys(self) -> list[str]: ...


class MemoryStore:
    """Process-local store. Values are deep-copied in and out so callers never share state."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}
        self.lock = threading.RLock()

    def get(self, key: str) -> Any | None:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def keys(self) -> list[str]:
        return sorted(self._data)


class JsonFileStore:
    """One ``<key>.json`` document per collection under the data root."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or settings.data_root).resolve()
        self.collection_root = self.root / "collections"
        self.collection_root.mkdir(parents=True, exist_ok=True)
        self.lock = threading.RLock()

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid collection key '{key}'")
        return self.collection_root / f"{key}.json"

    def get(self, key: str) -> Any | None:
        path = self._path(key)
        if not path.exists():
            return None
        with path.open("r", encoding="utf-8") as handle:
            try:
                return json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Collection file '{path}' is not valid JSON") from exc

    def set(self, key: str, value: Any) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        with self.lock:
            with tmp_path.open("w", encoding="utf-8") as handle:
                json.dump(value, handle, ensure_ascii=False, indent=2)
            tmp_path.replace(path)
        logger.debug(f"Wrote collection '{key}' to {path}")

    def keys(self) -> list[str]:
        return sorted(path.stem for path in self.collection_root.glob("*.json"))


def create_store(backend: str | None = None, root: Path | None = None) -> KeyValueStore:
    backend = backend or settings.storage_backend
    if backend == "memory":
        return MemoryStore()
    if backend == "file":
        return JsonFileStore(root=root)
    raise ValueError(f"Unknown storage backend '{backend}'")
