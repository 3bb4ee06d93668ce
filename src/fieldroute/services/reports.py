"""Service reports filed by technicians after a visit."""

from __future__ import annotations

import dataclasses
import logging
from collections import Counter
from typing import Callable, Optional

from ..data.repository import Repository
from ..models.domain import OrderStatus, ServiceReport
from .inventory import InventoryService
from .orders import OrderService
from .records import new_id, utc_now

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(
        self,
        repository: Repository[ServiceReport],
        orders: OrderService,
        inventory: InventoryService,
        clock: Callable = utc_now,
    ) -> None:
        self.repository = repository
        self.orders = orders
        self.inventory = inventory
        self.clock = clock

    def list_reports(self, order_id: Optional[str] = None) -> list[ServiceReport]:
        return [report for report in self.repository.list() if order_id is None or report.order_id == order_id]

    def submit_report(self, report: ServiceReport) -> ServiceReport:
        """Complete the report's order, take the used parts out of stock and store it.

        The stock check and every write happen under the store lock, and the
        report itself is written last, so a report that cannot be fulfilled
        leaves orders, inventory and reports untouched.
        """
        requested = Counter()
        for part in report.parts_used:
            if part.quantity <= 0:
                raise ValueError(f"Part quantity for {part.item_name or part.item_id} must be positive.")
            requested[part.item_id] += part.quantity

        with self.repository.lock:
            order = self.orders.get_order(report.order_id)
            for item_id, quantity in requested.items():
                item = self.inventory.get_item(item_id)
                if item.quantity < quantity:
                    raise ValueError(
                        f"Not enough stock for {item.name}: {item.quantity} {item.unit} available, {quantity} requested."
                    )

            stored = dataclasses.replace(
                report,
                id=report.id or new_id("rep"),
                date=report.date or self.clock().isoformat(),
                address=report.address or order.address,
                client_name=report.client_name or order.customer_name,
            )
            actor = stored.technician_name or "System"
            for item_id, quantity in requested.items():
                self.inventory.adjust_quantity(item_id, -quantity, actor_name=actor)
            if order.status != OrderStatus.COMPLETED:
                self.orders.update_status(order.id, OrderStatus.COMPLETED, actor_name=actor)
            self.repository.add(stored)

        logger.info(f"Report {stored.id} filed for order {order.id} with {len(requested)} part type(s)")
        return stored
