"""Project stop coordinates into percentage space for 2-D rendering."""

from __future__ import annotations

from typing import Sequence

from shapely.geometry import MultiPoint

from ...config import settings
from .models import BoundingBox, ProjectedPoint, Projection, SequencedStop


def bounding_box(stops: Sequence[SequencedStop]) -> BoundingBox:
    if not stops:
        raise ValueError("At least one stop is required to compute a bounding box.")
    min_lng, min_lat, max_lng, max_lat = MultiPoint([(stop.lng, stop.lat) for stop in stops]).bounds
    return BoundingBox(min_lat=min_lat, max_lat=max_lat, min_lng=min_lng, max_lng=max_lng)


def project_stops(
    stops: Sequence[SequencedStop],
    *,
    padding_ratio: float | None = None,
    fallback_buffer: float | None = None,
) -> Projection:
    """Map sequenced stops to x/y percentages of their padded bounding box.

    North maps to y=0 and west to x=0. Each axis is padded by ``padding_ratio``
    of its range on both sides, so extreme stops land on the padding boundary
    rather than on the container edge. When every stop shares a latitude (or
    longitude) the range is zero and ``fallback_buffer`` degrees are used
    instead, which centres a single stop at (50, 50).

    Values are not clamped.
    """
    padding_ratio = settings.projection_padding_ratio if padding_ratio is None else padding_ratio
    fallback_buffer = settings.projection_fallback_buffer_deg if fallback_buffer is None else fallback_buffer

    bbox = bounding_box(stops)

    lat_buffer = (bbox.max_lat - bbox.min_lat) * padding_ratio or fallback_buffer
    lng_buffer = (bbox.max_lng - bbox.min_lng) * padding_ratio or fallback_buffer

    lat_range = (bbox.max_lat - bbox.min_lat) + lat_buffer * 2
    lng_range = (bbox.max_lng - bbox.min_lng) + lng_buffer * 2

    top = bbox.max_lat + lat_buffer
    left = bbox.min_lng - lng_buffer

    points = [
        ProjectedPoint(
            stop=stop.stop,
            sequence_index=stop.sequence_index,
            x=(stop.lng - left) / lng_range * 100,
            y=(top - stop.lat) / lat_range * 100,
        )
        for stop in stops
    ]
    return Projection(points=points, bbox=bbox)
