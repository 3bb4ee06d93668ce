"""Wire repositories and services around a single key-value store."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import settings
from ..data.repository import Repository
from ..models.domain import AuditLog, InventoryItem, ServiceOrder, ServiceReport, Ticket, TimeRecord, User
from ..persistence.seed import seed_store
from ..persistence.store import Collection, KeyValueStore, create_store
from .assistant.service import AssistantService
from .audit import AuditService
from .inventory import InventoryService
from .orders import OrderService
from .reports import ReportService
from .tickets import TicketService
from .timesheet import TimesheetService
from .users import UserService


@dataclass(slots=True)
class Services:
    store: KeyValueStore
    audit: AuditService
    orders: OrderService
    users: UserService
    tickets: TicketService
    timesheet: TimesheetService
    inventory: InventoryService
    reports: ReportService
    assistant: AssistantService


def build_services(
    store: KeyValueStore | None = None,
    *,
    seed: bool | None = None,
    assistant: AssistantService | None = None,
) -> Services:
    if store is None:
        store = create_store()
    if seed is None:
        seed = settings.seed_demo_data
    if seed:
        seed_store(store)

    audit = AuditService(Repository(store, Collection.AUDIT_LOGS, AuditLog))
    orders = OrderService(Repository(store, Collection.ORDERS, ServiceOrder), audit)
    inventory = InventoryService(Repository(store, Collection.INVENTORY, InventoryItem), audit)
    return Services(
        store=store,
        audit=audit,
        orders=orders,
        users=UserService(Repository(store, Collection.USERS, User), audit),
        tickets=TicketService(Repository(store, Collection.TICKETS, Ticket)),
        timesheet=TimesheetService(Repository(store, Collection.TIME_RECORDS, TimeRecord)),
        inventory=inventory,
        reports=ReportService(Repository(store, Collection.REPORTS, ServiceReport), orders, inventory),
        assistant=assistant if assistant is not None else AssistantService(),
    )
