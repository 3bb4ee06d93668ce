import pytest
from fastapi.testclient import TestClient

from fieldroute.main import create_app
from fieldroute.persistence.store import MemoryStore
from fieldroute.services.assistant.service import AssistantService
from fieldroute.services.container import build_services


class EchoCompletion:
    def generate(self, prompt: str) -> str:
        return "Echo: " + prompt.rsplit("Client: ", 1)[-1].split("\n", 1)[0]


@pytest.fixture
def api_client() -> TestClient:
    services = build_services(MemoryStore(), seed=True, assistant=AssistantService(EchoCompletion))
    return TestClient(create_app(services))


def test_health(api_client: TestClient):
    assert api_client.get("/api/health").json() == {"status": "ok"}
    storage = api_client.get("/api/health/storage").json()
    assert storage["healthy"] is True
    assert "orders" in storage["collections"]


def test_technician_route_endpoint(api_client: TestClient):
    response = api_client.get("/api/routes/u1")

    assert response.status_code == 200
    payload = response.json()
    assert [point["id"] for point in payload["points"]] == ["so2", "so1"]
    assert [point["sequence_index"] for point in payload["points"]] == [1, 2]
    assert payload["completed_count"] == 1
    assert payload["pending_count"] == 1
    assert payload["has_active_route"] is True
    assert payload["waypoint_link"].endswith("/-23.561684,-46.655981")
    assert payload["polyline"].startswith("M ")


def test_unknown_technician_has_no_active_route(api_client: TestClient):
    payload = api_client.get("/api/routes/nobody").json()

    assert payload["points"] == []
    assert payload["bbox"] is None
    assert payload["waypoint_link"] is None
    assert payload["has_active_route"] is False


def test_route_preview_orders_ad_hoc_stops(api_client: TestClient):
    request = {
        "stops": [
            {"id": "a", "lat": 0.5, "lng": 0.5},
            {"id": "b", "lat": 0.5, "lng": 10.5},
            {"id": "c", "lat": 0.5, "lng": 5.5},
            {"id": "d", "lat": 2.5, "lng": 2.5, "status": "COMPLETED"},
        ],
        "maps_base_url": "https://maps.test/dir/",
    }

    payload = api_client.post("/api/routes/preview", json=request).json()

    assert [point["id"] for point in payload["points"]] == ["d", "a", "c", "b"]
    assert payload["waypoint_link"] == "https://maps.test/dir/0.5,0.5/0.5,5.5/0.5,10.5"
    for point in payload["points"]:
        assert 0 < point["x"] < 100
        assert 0 < point["y"] < 100


def test_order_crud(api_client: TestClient):
    created = api_client.post(
        "/api/orders",
        json={"title": "Install intercom", "lat": -23.56, "lng": -46.64, "assigned_to_id": "u2"},
    )
    assert created.status_code == 201
    order = created.json()
    assert order["status"] == "PENDING"

    updated = api_client.patch(f"/api/orders/{order['id']}", json={"status": "IN_PROGRESS"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "IN_PROGRESS"
    assert updated.json()["title"] == "Install intercom"

    listed = api_client.get("/api/orders", params={"technician_id": "u2"}).json()
    assert order["id"] in {item["id"] for item in listed}

    assert api_client.patch("/api/orders/missing", json={"title": "x"}).status_code == 404
    assert api_client.get("/api/orders/missing").status_code == 404
    assert api_client.post("/api/orders", json={"lat": 123}).status_code == 422


def test_report_submission_flow(api_client: TestClient):
    response = api_client.post(
        "/api/reports",
        json={
            "order_id": "so3",
            "technician_name": "Ana Souza",
            "services": {"cctv": True},
            "parts_used": [{"item_id": "iv3", "item_name": "RJ45 connector", "quantity": 20}],
        },
    )

    assert response.status_code == 201
    assert response.json()["client_name"] == "Accounting Office"
    assert api_client.get("/api/orders/so3").json()["status"] == "COMPLETED"
    inventory = {item["id"]: item for item in api_client.get("/api/inventory").json()}
    assert inventory["iv3"]["quantity"] == 480

    too_many = api_client.post(
        "/api/reports",
        json={"order_id": "so1", "technician_name": "Carlos", "parts_used": [{"item_id": "iv4", "quantity": 50}]},
    )
    assert too_many.status_code == 400
    assert api_client.post("/api/reports", json={"order_id": "zzz", "technician_name": "x"}).status_code == 404


def test_inventory_endpoints(api_client: TestClient):
    assert [item["id"] for item in api_client.get("/api/inventory/low-stock").json()] == ["iv4"]

    adjusted = api_client.post("/api/inventory/iv4/adjust", json={"delta": 5})
    assert adjusted.json()["quantity"] == 13
    assert api_client.get("/api/inventory/low-stock").json() == []
    assert api_client.post("/api/inventory/iv4/adjust", json={"delta": -100}).status_code == 400
    assert api_client.post("/api/inventory/nope/adjust", json={"delta": 1}).status_code == 404

    summary = api_client.get("/api/inventory/summary").json()
    assert summary["item_count"] == 4
    assert summary["low_stock_count"] == 0


def test_tickets_time_records_and_audit(api_client: TestClient):
    ticket = api_client.post("/api/tickets", json={"client_id": "client1", "subject": "Camera offline"}).json()
    thread = api_client.post(f"/api/tickets/{ticket['id']}/messages", json={"text": "Still offline"})
    assert thread.status_code == 201
    assert thread.json()["messages"][0]["sender"] == "user"

    clock_in = api_client.post(
        "/api/time-records",
        json={"employee_id": "u9", "employee_name": "New Tech", "type": "CLOCK_IN"},
    )
    assert clock_in.status_code == 201
    again = api_client.post(
        "/api/time-records",
        json={"employee_id": "u9", "employee_name": "New Tech", "type": "CLOCK_IN"},
    )
    assert again.status_code == 409

    api_client.post("/api/orders", json={"title": "Audit me"})
    actions = [entry["action"] for entry in api_client.get("/api/audit-logs").json()]
    assert "CREATE_ORDER" in actions


def test_assistant_chat(api_client: TestClient):
    response = api_client.post(
        "/api/assistant/chat",
        json={"message": "Is my order done?", "history": [{"sender": "user", "text": "Hi"}]},
    )

    assert response.status_code == 200
    assert response.json() == {"reply": "Echo: Is my order done?"}


def test_users(api_client: TestClient):
    employees = api_client.get("/api/users", params={"role": "EMPLOYEE"}).json()
    assert {user["id"] for user in employees} == {"u1", "u2"}

    created = api_client.post("/api/users", json={"name": "Bia Lima", "role": "EMPLOYEE"}).json()
    assert created["avatar"].endswith("seed=Bia+Lima")
    renamed = api_client.patch(f"/api/users/{created['id']}", json={"position": "Lead"}).json()
    assert renamed["position"] == "Lead"
    assert renamed["name"] == "Bia Lima"


def test_user_patch_clears_optional_fields(api_client: TestClient):
    created = api_client.post(
        "/api/users", json={"name": "Rui Costa", "role": "EMPLOYEE", "email": "rui@example.com", "department": "Field"}
    ).json()

    cleared = api_client.patch(f"/api/users/{created['id']}", json={"email": None, "department": None, "name": None})

    assert cleared.status_code == 200
    body = cleared.json()
    assert body["email"] is None
    assert body["department"] is None
    assert body["name"] == "Rui Costa"
