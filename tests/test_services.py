import threading
import time

import httpx
import pytest

from fieldroute.config import settings
from fieldroute.data.repository import NotFoundError
from fieldroute.models.domain import (
    ChatMessage,
    MessageSender,
    OrderStatus,
    PartUsage,
    ServiceReport,
    TicketStatus,
    TimeRecordType,
)
from fieldroute.models.patches import InventoryPatch, OrderPatch, TicketPatch
from fieldroute.persistence.store import MemoryStore
from fieldroute.services.assistant.client import GeminiClient
from fieldroute.services.assistant.service import (
    EMPTY_REPLY,
    FAILURE_REPLY,
    AssistantService,
    build_prompt,
)
from fieldroute.services.container import build_services


class StaticCompletion:
    def __init__(self, text: str) -> None:
        self.text = text
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.text


@pytest.fixture
def services():
    return build_services(MemoryStore(), seed=True, assistant=AssistantService(lambda: StaticCompletion("Hi!")))


@pytest.fixture
def empty_services():
    return build_services(MemoryStore(), seed=False)


def _report(order_id: str, parts: list[PartUsage]) -> ServiceReport:
    return ServiceReport(
        id="",
        order_id=order_id,
        client_name="",
        technician_name="Carlos Silva",
        date="",
        start_time="14:00",
        end_time="16:00",
        address="",
        parts_used=parts,
    )


def test_list_orders_newest_first(services):
    services.orders.save_order(OrderPatch(title="Old job", date="2001-01-01"), "old")

    orders = services.orders.list_orders()

    assert orders[-1].id == "old"


def test_save_order_creates_with_defaults(empty_services):
    order = empty_services.orders.save_order(OrderPatch(title="Install camera"))

    assert order.id.startswith("so_")
    assert order.status is OrderStatus.PENDING
    assert (order.lat, order.lng) == (settings.depot_latitude, settings.depot_longitude)
    assert order.customer_name == "Customer"
    assert empty_services.orders.list_orders()[0].id == order.id
    assert empty_services.audit.list_logs()[0].action == "CREATE_ORDER"


def test_update_order_merges_patch(services):
    updated = services.orders.update_order("so1", OrderPatch(assigned_to_id="u2"))

    assert updated.assigned_to_id == "u2"
    assert updated.title == "Preventive maintenance - server"
    assert {order.id for order in services.orders.orders_for_technician("u2")} == {"so1", "so3"}


def test_update_unknown_order_raises(services):
    with pytest.raises(NotFoundError):
        services.orders.update_status("missing", OrderStatus.COMPLETED)


def test_route_for_seeded_technician(services):
    view = services.orders.route_for_technician("u1")

    assert [point.id for point in view.points] == ["so2", "so1"]
    assert view.waypoint_link == f"{settings.maps_base_url}-23.561684,-46.655981"


def test_submit_report_completes_order_and_uses_stock(services):
    report = services.reports.submit_report(_report("so1", [PartUsage("iv1", "CAT6 network cable", 30)]))

    assert report.id.startswith("rep_")
    assert report.address == "Av. Paulista, 1000, Sao Paulo"
    assert services.orders.get_order("so1").status is OrderStatus.COMPLETED
    assert services.inventory.get_item("iv1").quantity == 120
    assert services.reports.list_reports("so1") == [report]


def test_submit_report_without_stock_changes_nothing(services):
    with pytest.raises(ValueError):
        services.reports.submit_report(
            _report("so1", [PartUsage("iv1", "cable", 10), PartUsage("iv4", "camera", 9)])
        )

    assert services.reports.list_reports() == []
    assert services.orders.get_order("so1").status is OrderStatus.PENDING
    assert services.inventory.get_item("iv1").quantity == 150
    assert services.inventory.get_item("iv4").quantity == 8


def test_submit_report_for_unknown_order(services):
    with pytest.raises(NotFoundError):
        services.reports.submit_report(_report("nope", []))


def test_inventory_adjust_and_low_stock(services):
    assert [item.id for item in services.inventory.low_stock()] == ["iv4"]

    updated = services.inventory.adjust_quantity("iv2", -8)

    assert updated.quantity == 4
    assert {item.id for item in services.inventory.low_stock()} == {"iv2", "iv4"}
    assert any(entry.action == "LOW_STOCK" for entry in services.audit.list_logs())
    with pytest.raises(ValueError):
        services.inventory.adjust_quantity("iv2", -5)


def test_inventory_save_and_value(empty_services):
    item = empty_services.inventory.save_item(InventoryPatch(name="Fuse", quantity=10, min_quantity=2, price=1.5))
    updated = empty_services.inventory.save_item(InventoryPatch(price=2.0), item.id)

    assert updated.name == "Fuse"
    assert updated.price == 2.0
    assert empty_services.inventory.stock_value() == pytest.approx(20.0)
    with pytest.raises(ValueError):
        empty_services.inventory.save_item(InventoryPatch(quantity=-1))


def test_timesheet_rejects_double_clock_in(empty_services):
    timesheet = empty_services.timesheet

    timesheet.clock(employee_id="u1", employee_name="Carlos", type=TimeRecordType.CLOCK_IN)
    with pytest.raises(ValueError):
        timesheet.clock(employee_id="u1", employee_name="Carlos", type=TimeRecordType.CLOCK_IN)
    record = timesheet.clock(employee_id="u1", employee_name="Carlos", type=TimeRecordType.CLOCK_OUT)

    assert record.location == "GPS Location"
    assert [r.type for r in timesheet.list_time_records("u1")] == [TimeRecordType.CLOCK_IN, TimeRecordType.CLOCK_OUT]


def test_ticket_messages_and_status(services):
    ticket = services.tickets.open_ticket(client_id="client1", client_name="", subject="Gate stuck", description="")

    services.tickets.add_message(ticket.id, MessageSender.USER, "The gate will not open")
    updated = services.tickets.update_ticket(ticket.id, TicketPatch(status=TicketStatus.IN_PROGRESS))

    assert updated.client_name == "Customer"
    assert updated.status is TicketStatus.IN_PROGRESS
    assert [message.text for message in updated.messages] == ["The gate will not open"]
    assert services.tickets.list_tickets("client1")[0].id == ticket.id
    with pytest.raises(ValueError):
        services.tickets.add_message(ticket.id, MessageSender.USER, "   ")


def test_assistant_prompt_and_reply():
    completion = StaticCompletion("  Your technician arrives at 3pm.  ")
    assistant = AssistantService(lambda: completion)
    history = [
        ChatMessage(id="1", sender=MessageSender.USER, text="Hello", timestamp=""),
        ChatMessage(id="2", sender=MessageSender.BOT, text="Hi, how can I help?", timestamp=""),
    ]

    reply = assistant.reply(history, "When is my visit?")

    assert reply == "Your technician arrives at 3pm."
    assert completion.prompts[0] == build_prompt(history, "When is my visit?")
    assert completion.prompts[0].endswith("Client: Hello\nAssistant: Hi, how can I help?\nClient: When is my visit?\nAssistant:")


def test_assistant_falls_back_on_failure(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", None)

    assert AssistantService().reply([], "Hello") == FAILURE_REPLY
    assert AssistantService(lambda: StaticCompletion("")).reply([], "Hello") == EMPTY_REPLY


def test_gemini_client_parses_candidates():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["x-goog-api-key"] == "test-key"
        assert request.url.path.endswith("/models/test-model:generateContent")
        return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": "Hello "}, {"text": "there"}]}}]})

    client = GeminiClient(api_key="test-key", model="test-model", transport=httpx.MockTransport(handler))

    assert client.generate("Hi") == "Hello there"


def test_gemini_client_does_not_retry_client_errors():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(400, json={"error": {"message": "bad request"}})

    client = GeminiClient(api_key="k", max_retries=3, backoff_seconds=0, transport=httpx.MockTransport(handler))

    with pytest.raises(httpx.HTTPStatusError):
        client.generate("Hi")
    assert len(calls) == 1


def test_concurrent_reports_cannot_oversell_stock(services, monkeypatch):
    original_get_item = services.inventory.get_item

    def slow_get_item(item_id):
        item = original_get_item(item_id)
        time.sleep(0.02)
        return item

    monkeypatch.setattr(services.inventory, "get_item", slow_get_item)
    outcomes = []

    def submit(order_id):
        try:
            outcomes.append(services.reports.submit_report(_report(order_id, [PartUsage("iv4", "camera", 8)])))
        except ValueError as exc:
            outcomes.append(exc)

    threads = [threading.Thread(target=submit, args=(order_id,)) for order_id in ("so1", "so3")]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    filed = [outcome for outcome in outcomes if isinstance(outcome, ServiceReport)]
    assert len(filed) == 1
    assert len(outcomes) == 2
    assert services.reports.list_reports() == filed
    assert services.inventory.get_item("iv4").quantity == 0
    statuses = {order_id: services.orders.get_order(order_id).status for order_id in ("so1", "so3")}
    assert statuses[filed[0].order_id] is OrderStatus.COMPLETED
    assert sorted(statuses.values()) == sorted([OrderStatus.COMPLETED, OrderStatus.PENDING])


@pytest.mark.parametrize("status_code", [503, 429])
def test_gemini_client_retries_server_errors(status_code):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) == 1:
            return httpx.Response(status_code, json={"error": {"message": "busy"}})
        return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": "Back"}]}}]})

    client = GeminiClient(api_key="k", max_retries=2, backoff_seconds=0, transport=httpx.MockTransport(handler))

    assert client.generate("Hi") == "Back"
    assert len(calls) == 2


def test_gemini_client_gives_up_after_retries():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(503)

    client = GeminiClient(api_key="k", max_retries=1, backoff_seconds=0, transport=httpx.MockTransport(handler))

    with pytest.raises(httpx.HTTPStatusError):
        client.generate("Hi")
    assert len(calls) == 2


def test_gemini_client_wraps_network_errors():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    client = GeminiClient(api_key="k", max_retries=2, backoff_seconds=0, transport=httpx.MockTransport(handler))

    with pytest.raises(ConnectionError):
        client.generate("Hi")
    assert len(calls) == 3
