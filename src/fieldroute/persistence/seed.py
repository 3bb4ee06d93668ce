"""Demo records written into empty collections on first start."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from .store import Collection, KeyValueStore

logger = logging.getLogger(__name__)


def _iso(moment: datetime) -> str:
    return moment.isoformat()


def demo_collections(now: datetime | None = None) -> dict[str, Any]:
    """Build the demo data set relative to ``now``."""

    now = now or datetime.now(timezone.utc)
    today = now.date().isoformat()
    morning = now.replace(hour=8, minute=0, second=0, microsecond=0)

    return {
        Collection.USERS.value: [
            {
                "id": "u1",
                "name": "Carlos Silva",
                "email": "carlos@digital.com",
                "role": "EMPLOYEE",
                "department": "Field",
                "position": "Senior Technician",
                "salary": 4500,
                "hire_date": "2022-03-15",
            },
            {
                "id": "u2",
                "name": "Ana Souza",
                "email": "ana@digital.com",
                "role": "EMPLOYEE",
                "department": "Field",
                "position": "Junior Technician",
                "salary": 3200,
                "hire_date": "2023-08-10",
            },
            {
                "id": "admin1",
                "name": "Roberto Admin",
                "email": "admin@admin.com",
                "role": "ADMIN",
                "department": "Management",
                "position": "General Manager",
                "salary": 8000,
                "hire_date": "2020-01-01",
            },
            {"id": "client1", "name": "Tech Solutions Ltda", "email": "client@tech.com", "role": "CLIENT"},
        ],
        Collection.ORDERS.value: [
            {
                "id": "so1",
                "title": "Preventive maintenance - server",
                "customer_name": "Tech Solutions Ltda",
                "address": "Av. Paulista, 1000, Sao Paulo",
                "lat": -23.561684,
                "lng": -46.655981,
                "description": "Check temperature and logs on the main server.",
                "status": "PENDING",
                "assigned_to_id": "u1",
                "date": today,
                "priority": "HIGH",
            },
            {
                "id": "so2",
                "title": "Network installation",
                "customer_name": "Cafe do Ponto",
                "address": "Rua Augusta, 500, Sao Paulo",
                "lat": -23.553177,
                "lng": -46.657567,
                "description": "Run Cat6 cabling.",
                "status": "COMPLETED",
                "assigned_to_id": "u1",
                "date": today,
                "priority": "MEDIUM",
            },
            {
                "id": "so3",
                "title": "Printer repair",
                "customer_name": "Accounting Office",
                "address": "Rua da Consolacao, 1200, Sao Paulo",
                "lat": -23.549231,
                "lng": -46.649121,
                "description": "Printer keeps jamming.",
                "status": "PENDING",
                "assigned_to_id": "u2",
                "date": today,
                "priority": "LOW",
            },
        ],
        Collection.TICKETS.value: [
            {
                "id": "t1",
                "client_id": "client1",
                "client_name": "Tech Solutions Ltda",
                "subject": "Slow internet",
                "description": "The connection keeps dropping.",
                "status": "OPEN",
                "created_at": _iso(now),
                "messages": [],
            }
        ],
        Collection.TIME_RECORDS.value: [
            {
                "id": "tr1",
                "employee_id": "u1",
                "employee_name": "Carlos Silva",
                "type": "CLOCK_IN",
                "timestamp": _iso(morning),
                "location": "Office",
            },
            {
                "id": "tr2",
                "employee_id": "u2",
                "employee_name": "Ana Souza",
                "type": "CLOCK_IN",
                "timestamp": _iso(morning + timedelta(minutes=15)),
                "location": "Office",
            },
        ],
        Collection.REPORTS.value: [],
        Collection.INVENTORY.value: [
            {"id": "iv1", "name": "CAT6 network cable", "sku": "CAB-001", "category": "Cabling",
             "quantity": 150, "min_quantity": 50, "price": 2.5, "unit": "m", "last_updated": _iso(now)},
            {"id": "iv2", "name": "Wi-Fi 6 router", "sku": "NET-002", "category": "Equipment",
             "quantity": 12, "min_quantity": 5, "price": 350.0, "unit": "pc", "last_updated": _iso(now)},
            {"id": "iv3", "name": "RJ45 connector", "sku": "CON-003", "category": "Accessories",
             "quantity": 500, "min_quantity": 100, "price": 0.5, "unit": "pc", "last_updated": _iso(now)},
            {"id": "iv4", "name": "1080p IP camera", "sku": "SEC-004", "category": "Security",
             "quantity": 8, "min_quantity": 10, "price": 180.0, "unit": "pc", "last_updated": _iso(now)},
        ],
        Collection.AUDIT_LOGS.value: [
            {
                "id": "al1",
                "action": "SYSTEM_INIT",
                "actor_name": "System",
                "details": "Platform initialised",
                "timestamp": _iso(now - timedelta(hours=3)),
                "severity": "INFO",
            }
        ],
    }


def seed_store(store: KeyValueStore, now: datetime | None = None) -> list[str]:
    """Write demo data into collections that do not exist yet. Returns the seeded keys."""

    seeded: list[str] = []
    for key, records in demo_collections(now).items():
        if store.get(key) is None:
            store.set(key, records)
            seeded.append(key)
    if seeded:
        logger.info(f"Seeded demo collections: {', '.join(seeded)}")
    return seeded
