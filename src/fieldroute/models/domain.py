"""Domain models for field-service records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELED = "CANCELED"


class OrderPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Role(str, Enum):
    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"
    CLIENT = "CLIENT"


class TicketStatus(str, Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"


class MessageSender(str, Enum):
    USER = "user"
    BOT = "bot"
    ADMIN = "admin"


class TimeRecordType(str, Enum):
    CLOCK_IN = "CLOCK_IN"
    CLOCK_OUT = "CLOCK_OUT"


class Severity(str, Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"


@dataclass(slots=True)
class ServiceOrder:
    """A service visit at a customer location; the unit that gets routed."""

    id: str
    title: str
    customer_name: str
    address: str
    lat: float
    lng: float
    description: str
    status: OrderStatus
    assigned_to_id: str
    date: str
    priority: Optional[OrderPriority] = None

    @property
    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED


@dataclass(slots=True)
class User:
    id: str
    name: str
    role: Role
    email: Optional[str] = None
    avatar: Optional[str] = None
    status: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    salary: Optional[float] = None
    hire_date: Optional[str] = None


@dataclass(slots=True)
class ChatMessage:
    id: str
    sender: MessageSender
    text: str
    timestamp: str


@dataclass(slots=True)
class Ticket:
    id: str
    client_id: str
    client_name: str
    subject: str
    description: str
    status: TicketStatus
    created_at: str
    messages: List[ChatMessage] = field(default_factory=list)


@dataclass(slots=True)
class TimeRecord:
    id: str
    employee_id: str
    employee_name: str
    type: TimeRecordType
    timestamp: str
    location: Optional[str] = None


@dataclass(slots=True)
class ServiceChecklist:
    gate: bool = False
    cctv: bool = False
    intercom: bool = False
    lock: bool = False
    preventive: bool = False


@dataclass(slots=True)
class PartUsage:
    item_id: str
    item_name: str
    quantity: int


@dataclass(slots=True)
class ServiceReport:
    """Technician's record of a finished visit."""

    id: str
    order_id: str
    client_name: str
    technician_name: str
    date: str
    start_time: str
    end_time: str
    address: str
    services: ServiceChecklist = field(default_factory=ServiceChecklist)
    comments: str = ""
    photos: List[str] = field(default_factory=list)
    signature_name: str = ""
    parts_used: List[PartUsage] = field(default_factory=list)


@dataclass(slots=True)
class InventoryItem:
    id: str
    name: str
    sku: str
    category: str
    quantity: int
    min_quantity: int
    price: float
    unit: str
    last_updated: str

    @property
    def is_low_stock(self) -> bool:
        return self.quantity <= self.min_quantity


@dataclass(slots=True)
class AuditLog:
    id: str
    action: str
    actor_name: str
    details: str
    timestamp: str
    severity: Severity = Severity.INFO
