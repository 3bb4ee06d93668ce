"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ...models.domain import OrderStatus, ServiceOrder


@dataclass(slots=True)
class SequencedStop:
    stop: ServiceOrder
    sequence_index: int

    @property
    def id(self) -> str:
        return self.stop.id

    @property
    def lat(self) -> float:
        return self.stop.lat

    @property
    def lng(self) -> float:
        return self.stop.lng

    @property
    def status(self) -> OrderStatus:
        return self.stop.status


@dataclass(slots=True)
class ProjectedPoint(SequencedStop):
    x: float
    y: float


@dataclass(slots=True, frozen=True)
class BoundingBox:
    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float


@dataclass(slots=True)
class Projection:
    points: List[ProjectedPoint]
    bbox: BoundingBox


@dataclass(slots=True)
class RouteView:
    """Everything a client needs to draw one technician's route."""

    technician_id: Optional[str]
    points: List[ProjectedPoint]
    bbox: Optional[BoundingBox]
    polyline: str
    waypoint_link: Optional[str]
    pending_count: int
    completed_count: int
    pending_distance_km: float
    rejected_ids: List[str] = field(default_factory=list)

    @property
    def has_active_route(self) -> bool:
        return self.pending_count > 0
