"""Typed access to a single stored collection."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Generic, List, Optional, TypeVar

from pydantic import TypeAdapter

from ..models.patches import merge
from ..persistence.store import Collection, KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NotFoundError(KeyError):
    """Raised when an entity id is not present in its collection."""

    def __init__(self, collection: str, entity_id: str) -> None:
        super().__init__(entity_id)
        self.collection = collection
        self.entity_id = entity_id

    def __str__(self) -> str:
        return f"{self.collection} entry '{self.entity_id}' not found"


class Repository(Generic[T]):
    """Load, mutate and save one collection of dataclass records.

    Every mutation writes the whole collection back and returns the affected
    entity, so callers update their own view without reloading. Mutations hold
    the store lock from read to write.
    """

    def __init__(self, store: KeyValueStore, collection: Collection, entity_type: type[T]) -> None:
        self.store = store
        self.collection = collection
        self.entity_type = entity_type
        self._adapter: TypeAdapter[List[T]] = TypeAdapter(List[entity_type])  # type: ignore[valid-type]

    @property
    def key(self) -> str:
        return self.collection.value

    @property
    def lock(self) -> threading.RLock:
        return self.store.lock

    def list(self) -> list[T]:
        raw = self.store.get(self.key)
        if raw is None:
            return []
        return self._adapter.validate_python(raw)

    def save_all(self, items: list[T]) -> None:
        self.store.set(self.key, self._adapter.dump_python(items, mode="json"))

    def find(self, entity_id: str) -> Optional[T]:
        for item in self.list():
            if item.id == entity_id:  # type: ignore[attr-defined]
                return item
        return None

    def get(self, entity_id: str) -> T:
        item = self.find(entity_id)
        if item is None:
            raise NotFoundError(self.key, entity_id)
        return item

    def add(self, entity: T, *, prepend: bool = False) -> T:
        with self.store.lock:
            items = self.list()
            if prepend:
                items.insert(0, entity)
            else:
                items.append(entity)
            self.save_all(items)
        logger.debug(f"Added {self.key} entry {entity.id}")  # type: ignore[attr-defined]
        return entity

    def update(self, entity_id: str, change: Callable[[T], T]) -> T:
        with self.store.lock:
            items = self.list()
            for index, item in enumerate(items):
                if item.id == entity_id:  # type: ignore[attr-defined]
                    items[index] = change(item)
                    self.save_all(items)
                    return items[index]
        raise NotFoundError(self.key, entity_id)

    def apply(self, entity_id: str, patch: Any) -> T:
        return self.update(entity_id, lambda item: merge(item, patch))

    def remove(self, entity_id: str) -> T:
        with self.store.lock:
            items = self.list()
            for index, item in enumerate(items):
                if item.id == entity_id:  # type: ignore[attr-defined]
                    removed = items.pop(index)
                    self.save_all(items)
                    return removed
        raise NotFoundError(self.key, entity_id)
