"""Timesheet, report and inventory request schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.domain import PartUsage, ServiceChecklist, ServiceReport, TimeRecordType
from ..models.patches import InventoryPatch


class TimeRecordRequest(BaseModel):
    employee_id: str
    employee_name: str
    type: TimeRecordType
    location: Optional[str] = None


class PartUsageModel(BaseModel):
    item_id: str
    item_name: str = ""
    quantity: int = Field(..., gt=0)


class ServiceChecklistModel(BaseModel):
    gate: bool = False
    cctv: bool = False
    intercom: bool = False
    lock: bool = False
    preventive: bool = False


class ReportCreateRequest(BaseModel):
    order_id: str
    technician_name: str
    client_name: str = ""
    date: str = ""
    start_time: str = ""
    end_time: str = ""
    address: str = ""
    services: ServiceChecklistModel = Field(default_factory=ServiceChecklistModel)
    comments: str = ""
    photos: List[str] = Field(default_factory=list)
    signature_name: str = ""
    parts_used: List[PartUsageModel] = Field(default_factory=list)

    def to_report(self) -> ServiceReport:
        return ServiceReport(
            id="",
            order_id=self.order_id,
            client_name=self.client_name,
            technician_name=self.technician_name,
            date=self.date,
            start_time=self.start_time,
            end_time=self.end_time,
            address=self.address,
            services=ServiceChecklist(**self.services.model_dump()),
            comments=self.comments,
            photos=list(self.photos),
            signature_name=self.signature_name,
            parts_used=[PartUsage(**part.model_dump()) for part in self.parts_used],
        )


class InventoryItemRequest(BaseModel):
    name: Optional[str] = None
    sku: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0)
    min_quantity: Optional[int] = Field(default=None, ge=0)
    price: Optional[float] = Field(default=None, ge=0.0)
    unit: Optional[str] = None

    def to_patch(self) -> InventoryPatch:
        return InventoryPatch(**self.model_dump(exclude_unset=True, exclude_none=True))


class InventoryAdjustRequest(BaseModel):
    delta: int


class InventorySummary(BaseModel):
    item_count: int
    low_stock_count: int
    stock_value: float
