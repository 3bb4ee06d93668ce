"""Partial-update records for domain entities.

A patch carries only the fields a caller wants to change. Fields left at
``UNSET`` are ignored by :func:`merge`, so ``None`` can still be written
explicitly to optional fields.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional, TypeVar

from .domain import OrderPriority, OrderStatus, Role, TicketStatus


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()

T = TypeVar("T")


@dataclass(slots=True)
class OrderPatch:
    title: str = UNSET
    customer_name: str = UNSET
    address: str = UNSET
    lat: float = UNSET
    lng: float = UNSET
    description: str = UNSET
    status: OrderStatus = UNSET
    assigned_to_id: str = UNSET
    date: str = UNSET
    priority: Optional[OrderPriority] = UNSET


@dataclass(slots=True)
class UserPatch:
    name: str = UNSET
    role: Role = UNSET
    email: Optional[str] = UNSET
    avatar: Optional[str] = UNSET
    status: Optional[str] = UNSET
    department: Optional[str] = UNSET
    position: Optional[str] = UNSET
    salary: Optional[float] = UNSET


@dataclass(slots=True)
class TicketPatch:
    subject: str = UNSET
    description: str = UNSET
    status: TicketStatus = UNSET


@dataclass(slots=True)
class InventoryPatch:
    name: str = UNSET
    sku: str = UNSET
    category: str = UNSET
    quantity: int = UNSET
    min_quantity: int = UNSET
    price: float = UNSET
    unit: str = UNSET


def present_fields(patch: Any) -> dict[str, Any]:
    """Return the fields of ``patch`` that carry a value."""

    return {
        item.name: getattr(patch, item.name)
        for item in dataclasses.fields(patch)
        if getattr(patch, item.name) is not UNSET
    }


def merge(base: T, patch: Any) -> T:
    """Return a copy of ``base`` with every present patch field applied."""

    changes = present_fields(patch)
    unknown = set(changes) - {item.name for item in dataclasses.fields(base)}
    if unknown:
        raise ValueError(f"Patch fields not present on {type(base).__name__}: {sorted(unknown)}")
    return dataclasses.replace(base, **changes)
