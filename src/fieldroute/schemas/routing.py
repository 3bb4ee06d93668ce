"""Route view request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.domain import OrderPriority, OrderStatus, ServiceOrder
from ..services.routing.models import RouteView


class PreviewStop(BaseModel):
    id: str
    lat: float
    lng: float
    status: OrderStatus = OrderStatus.PENDING
    title: str = ""
    customer_name: str = ""
    address: str = ""
    assigned_to_id: str = ""
    priority: Optional[OrderPriority] = None

    def to_order(self) -> ServiceOrder:
        return ServiceOrder(
            id=self.id,
            title=self.title,
            customer_name=self.customer_name,
            address=self.address,
            lat=self.lat,
            lng=self.lng,
            description="",
            status=self.status,
            assigned_to_id=self.assigned_to_id,
            date="",
            priority=self.priority,
        )


class RoutePreviewRequest(BaseModel):
    stops: List[PreviewStop] = Field(default_factory=list)
    maps_base_url: Optional[str] = Field(
        default=None,
        description="Override for the navigation link base URL.",
    )


class BoundingBoxModel(BaseModel):
    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float


class RoutePointModel(BaseModel):
    id: str
    sequence_index: int
    x: float
    y: float
    lat: float
    lng: float
    status: OrderStatus
    title: str
    customer_name: str
    address: str


class RouteViewResponse(BaseModel):
    technician_id: Optional[str]
    has_active_route: bool
    points: List[RoutePointModel]
    bbox: Optional[BoundingBoxModel]
    polyline: str
    waypoint_link: Optional[str]
    pending_count: int
    completed_count: int
    pending_distance_km: float
    rejected_ids: List[str]

    @classmethod
    def from_view(cls, view: RouteView) -> "RouteViewResponse":
        return cls(
            technician_id=view.technician_id,
            has_active_route=view.has_active_route,
            points=[
                RoutePointModel(
                    id=point.id,
                    sequence_index=point.sequence_index,
                    x=point.x,
                    y=point.y,
                    lat=point.lat,
                    lng=point.lng,
                    status=point.status,
                    title=point.stop.title,
                    customer_name=point.stop.customer_name,
                    address=point.stop.address,
                )
                for point in view.points
            ],
            bbox=(
                BoundingBoxModel(
                    min_lat=view.bbox.min_lat,
                    max_lat=view.bbox.max_lat,
                    min_lng=view.bbox.min_lng,
                    max_lng=view.bbox.max_lng,
                )
                if view.bbox
                else None
            ),
            polyline=view.polyline,
            waypoint_link=view.waypoint_link,
            pending_count=view.pending_count,
            completed_count=view.completed_count,
            pending_distance_km=round(view.pending_distance_km, 3),
            rejected_ids=list(view.rejected_ids),
        )
