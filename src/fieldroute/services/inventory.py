"""Warehouse stock levels."""

from __future__ import annotations

import dataclasses
import logging
from typing import Callable, Optional

from ..data.repository import Repository
from ..models.domain import InventoryItem, Severity
from ..models.patches import InventoryPatch, merge
from .audit import AuditService
from .records import new_id, utc_now

logger = logging.getLogger(__name__)


class InventoryService:
    def __init__(self, repository: Repository[InventoryItem], audit: AuditService, clock: Callable = utc_now) -> None:
        self.repository = repository
        self.audit = audit
        self.clock = clock

    def list_items(self) -> list[InventoryItem]:
        return self.repository.list()

    def get_item(self, item_id: str) -> InventoryItem:
        return self.repository.get(item_id)

    def save_item(self, patch: InventoryPatch, item_id: Optional[str] = None) -> InventoryItem:
        for value in (patch.quantity, patch.min_quantity):
            if isinstance(value, int) and value < 0:
                raise ValueError("Quantities must not be negative.")

        with self.repository.lock:
            if item_id is not None and self.repository.find(item_id) is not None:
                return self.repository.update(
                    item_id,
                    lambda item: dataclasses.replace(merge(item, patch), last_updated=self.clock().isoformat()),
                )

            item = InventoryItem(
                id=item_id or new_id("iv"),
                name=patch.name or "New item",
                sku=patch.sku or "",
                category=patch.category or "General",
                quantity=patch.quantity or 0,
                min_quantity=patch.min_quantity or 0,
                price=patch.price or 0.0,
                unit=patch.unit or "pc",
                last_updated=self.clock().isoformat(),
            )
            return self.repository.add(item)

    def adjust_quantity(self, item_id: str, delta: int, *, actor_name: str = "System") -> InventoryItem:
        """Add ``delta`` (negative to take stock out). Stock never goes below zero."""

        def change(current: InventoryItem) -> InventoryItem:
            new_quantity = current.quantity + delta
            if new_quantity < 0:
                raise ValueError(
                    f"Not enough stock for {current.name}: {current.quantity} {current.unit} available, {-delta} requested."
                )
            return dataclasses.replace(current, quantity=new_quantity, last_updated=self.clock().isoformat())

        updated = self.repository.update(item_id, change)
        if updated.is_low_stock:
            logger.warning(f"Low stock for {updated.name}: {updated.quantity} {updated.unit} left")
            self.audit.record(
                "LOW_STOCK",
                actor_name,
                f"{updated.name} is at {updated.quantity} {updated.unit} (minimum {updated.min_quantity})",
                Severity.WARNING,
            )
        return updated

    def low_stock(self) -> list[InventoryItem]:
        return [item for item in self.repository.list() if item.is_low_stock]

    def stock_value(self) -> float:
        return sum(item.price * item.quantity for item in self.repository.list())
