"""Service order management."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..config import settings
from ..data.repository import Repository
from ..models.domain import OrderStatus, ServiceOrder
from ..models.patches import OrderPatch, UNSET, present_fields
from .audit import AuditService
from .records import new_id, parse_timestamp, utc_now
from .routing.models import RouteView
from .routing.service import build_route_view

logger = logging.getLogger(__name__)


class OrderService:
    def __init__(
        self,
        repository: Repository[ServiceOrder],
        audit: AuditService,
        clock: Callable = utc_now,
    ) -> None:
        self.repository = repository
        self.audit = audit
        self.clock = clock

    def list_orders(self) -> list[ServiceOrder]:
        """All orders, most recent date first."""

        return sorted(self.repository.list(), key=lambda order: parse_timestamp(order.date), reverse=True)

    def get_order(self, order_id: str) -> ServiceOrder:
        return self.repository.get(order_id)

    def orders_for_technician(self, technician_id: str) -> list[ServiceOrder]:
        return [order for order in self.repository.list() if order.assigned_to_id == technician_id]

    def save_order(self, patch: OrderPatch, order_id: Optional[str] = None, *, actor_name: str = "System") -> ServiceOrder:
        """Update ``order_id`` with ``patch`` or create a new order from it.

        An id that does not exist yet is used for the new order.
        """
        with self.repository.lock:
            if order_id is not None and self.repository.find(order_id) is not None:
                updated = self.repository.apply(order_id, patch)
                self.audit.record(
                    "UPDATE_ORDER",
                    actor_name,
                    f"Order {order_id} updated: {', '.join(sorted(present_fields(patch))) or 'no changes'}",
                )
                return updated

            created = ServiceOrder(
                id=order_id or new_id("so"),
                title=patch.title or "New order",
                customer_name=patch.customer_name or "Customer",
                address=patch.address or "",
                lat=settings.depot_latitude if patch.lat is UNSET else patch.lat,
                lng=settings.depot_longitude if patch.lng is UNSET else patch.lng,
                description=patch.description or "",
                status=patch.status or OrderStatus.PENDING,
                assigned_to_id=patch.assigned_to_id or "",
                date=patch.date or self.clock().date().isoformat(),
                priority=None if patch.priority is UNSET else patch.priority,
            )
            self.repository.add(created, prepend=True)
        self.audit.record("CREATE_ORDER", actor_name, f"Order {created.id} created: {created.title}")
        return created

    def update_order(self, order_id: str, patch: OrderPatch, *, actor_name: str = "System") -> ServiceOrder:
        """Apply ``patch`` to an existing order; raises ``NotFoundError`` for unknown ids."""

        with self.repository.lock:
            self.repository.get(order_id)
            return self.save_order(patch, order_id, actor_name=actor_name)

    def update_status(self, order_id: str, status: OrderStatus, *, actor_name: str = "System") -> ServiceOrder:
        return self.update_order(order_id, OrderPatch(status=status), actor_name=actor_name)

    def route_for_technician(self, technician_id: str) -> RouteView:
        return build_route_view(self.orders_for_technician(technician_id), technician_id=technician_id)
