from fieldroute.models.domain import OrderStatus, ServiceOrder
from fieldroute.services.routing.path import to_polyline, to_waypoint_link
from fieldroute.services.routing.projection import project_stops
from fieldroute.services.routing.sequencer import sequence_stops

MAPS = "https://www.google.com/maps/dir/"


def _order(oid: str, lat: float, lng: float, status: OrderStatus = OrderStatus.PENDING) -> ServiceOrder:
    return ServiceOrder(
        id=oid,
        title=f"Order {oid}",
        customer_name=f"Customer {oid}",
        address="Street 1",
        lat=lat,
        lng=lng,
        description="",
        status=status,
        assigned_to_id="u1",
        date="2024-05-01",
    )


def _points(*orders: ServiceOrder):
    return project_stops(sequence_stops(list(orders))).points


def test_polyline_needs_two_points():
    assert to_polyline([]) == ""
    assert to_polyline(_points(_order("a", 1.5, 2.5))) == ""


def test_polyline_lists_every_point_in_sequence_order():
    points = _points(_order("a", 0, 0), _order("b", 0, 10), _order("c", 0, 5), _order("d", 3, 3))

    polyline = to_polyline(points)

    assert polyline.startswith("M ")
    pairs = polyline[2:].split(" L ")
    assert len(pairs) == 4
    assert pairs == [f"{point.x},{point.y}" for point in points]


def test_waypoint_link_skips_completed_stops():
    stops = sequence_stops([
        _order("a", -23.561684, -46.655981),
        _order("b", -23.553177, -46.657567, OrderStatus.COMPLETED),
        _order("c", -23.549231, -46.649121),
    ])

    link = to_waypoint_link(MAPS, stops)

    assert link == f"{MAPS}-23.561684,-46.655981/-23.549231,-46.649121"
    assert len(link[len(MAPS):].split("/")) == 2


def test_waypoint_link_is_none_without_pending_stops():
    stops = sequence_stops([_order("a", 1.5, 2.5, OrderStatus.COMPLETED)])

    assert to_waypoint_link(MAPS, stops) is None
    assert to_waypoint_link(MAPS, []) is None
