"""Route group exports."""

from . import assistant, audit, health, inventory, orders, reports, routes, tickets, timesheet, users

__all__ = ["assistant", "audit", "health", "inventory", "orders", "reports", "routes", "tickets", "timesheet", "users"]
