"""Render a sequenced route as an SVG path and as a navigation link."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ...models.domain import OrderStatus


class _Plotted(Protocol):
    x: float
    y: float


class _Located(Protocol):
    lat: float
    lng: float
    status: OrderStatus


def to_polyline(points: Sequence[_Plotted]) -> str:
    """Return ``"M x1,y1 L x2,y2 ..."`` or ``""`` when there is no line to draw."""

    if len(points) < 2:
        return ""
    return "M " + " L ".join(f"{point.x},{point.y}" for point in points)


def to_waypoint_link(base_url: str, stops: Sequence[_Located]) -> Optional[str]:
    """Append the pending stops as ``lat,lng`` segments to ``base_url``.

    Returns ``None`` when every stop is completed, meaning there is nothing
    to navigate to.
    """
    waypoints = "/".join(
        f"{stop.lat},{stop.lng}" for stop in stops if stop.status != OrderStatus.COMPLETED
    )
    if not waypoints:
        return None
    return f"{base_url}{waypoints}"
