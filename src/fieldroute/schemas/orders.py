"""Service order request schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ..models.domain import OrderPriority, OrderStatus
from ..models.patches import OrderPatch


class OrderPayload(BaseModel):
    """Fields to set on an order. Omitted fields are left unchanged on update."""

    title: Optional[str] = None
    customer_name: Optional[str] = None
    address: Optional[str] = None
    lat: Optional[float] = Field(default=None, ge=-90.0, le=90.0)
    lng: Optional[float] = Field(default=None, ge=-180.0, le=180.0)
    description: Optional[str] = None
    status: Optional[OrderStatus] = None
    assigned_to_id: Optional[str] = None
    date: Optional[str] = None
    priority: Optional[OrderPriority] = None

    def to_patch(self) -> OrderPatch:
        return OrderPatch(**_present(self.model_dump(exclude_unset=True)))


class OrderCreateRequest(OrderPayload):
    id: Optional[str] = Field(default=None, description="Client-chosen id; generated when omitted.")

    def to_patch(self) -> OrderPatch:
        return OrderPatch(**_present(self.model_dump(exclude_unset=True, exclude={"id"})))


NULLABLE_FIELDS = {"priority"}


def _present(values: dict) -> dict:
    # An explicit null only clears fields that are optional on the order itself.
    return {key: value for key, value in values.items() if value is not None or key in NULLABLE_FIELDS}
