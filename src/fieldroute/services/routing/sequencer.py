"""Nearest-neighbor visit ordering for a technician's stops.

Completed stops are kept in their original order at the head of the route.
Pending stops start from the first pending stop in input order and then
always jump to the closest remaining stop. Distance is Euclidean in degree
space, which is good enough at city scale and keeps the ordering stable.

The search is O(n^2) in the number of pending stops and is intended for
tens of stops per route. Replacing it with a better TSP heuristic would
change the visiting order clients already rely on.
"""

from __future__ import annotations

import math
from typing import Sequence

from ...models.domain import OrderStatus, ServiceOrder
from .models import SequencedStop


def degree_distance(a: ServiceOrder, b: ServiceOrder) -> float:
    """Straight-line distance in degrees. NaN coordinates count as infinitely far."""

    distance = math.hypot(b.lat - a.lat, b.lng - a.lng)
    if math.isnan(distance):
        return math.inf
    return distance


def order_stops(stops: Sequence[ServiceOrder]) -> list[ServiceOrder]:
    if len(stops) <= 1:
        return list(stops)

    completed = [stop for stop in stops if stop.status == OrderStatus.COMPLETED]
    pending = [stop for stop in stops if stop.status != OrderStatus.COMPLETED]

    route = list(completed)
    if not pending:
        return route

    # Removal is by position so stops sharing an id stay distinct.
    pool = list(pending)
    current = pool.pop(0)
    route.append(current)

    while pool:
        nearest_index = 0
        min_distance = degree_distance(current, pool[0])
        for index in range(1, len(pool)):
            distance = degree_distance(current, pool[index])
            if distance < min_distance:
                min_distance = distance
                nearest_index = index
        current = pool.pop(nearest_index)
        route.append(current)

    return route


def sequence_stops(stops: Sequence[ServiceOrder]) -> list[SequencedStop]:
    """Order ``stops`` for visiting and number them from 1."""

    return [
        SequencedStop(stop=stop, sequence_index=index)
        for index, stop in enumerate(order_stops(stops), start=1)
    ]
