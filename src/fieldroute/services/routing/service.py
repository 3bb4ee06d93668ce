"""Route view orchestration: validate, sequence, project and render stops."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ...config import settings
from ...models.domain import ServiceOrder
from ..geospatial import is_valid_coordinate, path_length_km
from .models import RouteView
from .path import to_polyline, to_waypoint_link
from .projection import project_stops
from .sequencer import sequence_stops

logger = logging.getLogger(__name__)


def _partition_valid(orders: Iterable[ServiceOrder]) -> tuple[list[ServiceOrder], list[str]]:
    valid: list[ServiceOrder] = []
    rejected: list[str] = []
    for order in orders:
        if is_valid_coordinate(order.lat, order.lng):
            valid.append(order)
        else:
            rejected.append(order.id)
    return valid, rejected


def build_route_view(
    orders: Iterable[ServiceOrder],
    *,
    technician_id: Optional[str] = None,
    maps_base_url: Optional[str] = None,
    padding_ratio: Optional[float] = None,
    fallback_buffer: Optional[float] = None,
) -> RouteView:
    """Build the drawable route for ``orders``.

    When ``technician_id`` is given only orders assigned to that technician
    are routed. Orders with unusable coordinates are left out and reported
    in ``rejected_ids`` instead of failing the whole view.
    """
    selected = [
        order for order in orders if technician_id is None or order.assigned_to_id == technician_id
    ]
    valid, rejected = _partition_valid(selected)
    if rejected:
        logger.warning(
            f"Skipping {len(rejected)} order(s) with invalid coordinates"
            f"{f' for technician {technician_id}' if technician_id else ''}: {', '.join(rejected)}"
        )

    if not valid:
        return RouteView(
            technician_id=technician_id,
            points=[],
            bbox=None,
            polyline="",
            waypoint_link=None,
            pending_count=0,
            completed_count=0,
            pending_distance_km=0.0,
            rejected_ids=rejected,
        )

    sequenced = sequence_stops(valid)
    projection = project_stops(sequenced, padding_ratio=padding_ratio, fallback_buffer=fallback_buffer)
    pending = [stop for stop in sequenced if not stop.stop.is_completed]

    view = RouteView(
        technician_id=technician_id,
        points=projection.points,
        bbox=projection.bbox,
        polyline=to_polyline(projection.points),
        waypoint_link=to_waypoint_link(maps_base_url or settings.maps_base_url, sequenced),
        pending_count=len(pending),
        completed_count=len(sequenced) - len(pending),
        pending_distance_km=path_length_km([(stop.lat, stop.lng) for stop in pending]),
        rejected_ids=rejected,
    )
    logger.debug(
        f"Route for {technician_id or 'all technicians'}: {len(sequenced)} stops, "
        f"{view.pending_count} pending, {view.pending_distance_km:.2f} km"
    )
    return view
