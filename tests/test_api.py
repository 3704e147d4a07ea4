import pytest

from overtime_system.container import assemble
from overtime_system.main import create_app


@pytest.fixture
def app(monkeypatch, employees_repo, overtime_repo, employee_a, employee_b, scenario_records):
    monkeypatch.setenv("APP_ENV", "testing")
    container = assemble(employees_repo([employee_a, employee_b]), overtime_repo(scenario_records))
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


def test_dashboard_with_explicit_period(client):
    res = client.get("/api/dashboard?start=2024-01-01&end=2024-01-31")

    body = res.get_json()
    assert res.status_code == 200
    assert body["active_employees"] == 2
    assert body["total_hours"] == 4
    assert body["total_value"]["amount"] == 72
    assert body["daily"] == [{"date": "2024-01-05", "hours": 2.0}, {"date": "2024-01-06", "hours": 2.0}]
    assert body["top_employees"][0]["employee_id"] == "a"


def test_dashboard_confidential_masks_value(client):
    body = client.get("/api/dashboard?start=2024-01-01&end=2024-01-31&confidential=1").get_json()

    assert body["total_value"]["amount"] is None
    assert body["total_value"]["label"] == "••••••"
    assert body["total_hours"] == 4


def test_receipts(client):
    body = client.get("/api/receipts?start=2024-01-06").get_json()

    assert len(body["receipts"]) == 1
    receipt = body["receipts"][0]
    assert receipt["employee_code"] == "A01"
    assert receipt["total_hours"] == 2
    assert receipt["total_value"]["amount"] == 40
    assert receipt["last_date"] == "2024-01-06"


def test_bad_date_is_400(client):
    res = client.get("/api/receipts?start=06/01/2024")
    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_overtime_crud_flow(client):
    res = client.post(
        "/api/overtime",
        json={
            "employee_id": "b",
            "date": "2024-01-07",
            "start_time": "18:00",
            "end_time": "19:30",
            "service_type": "100%",
            "observation": "",
        },
    )
    assert res.status_code == 201
    record_id = res.get_json()["record_id"]

    listing = client.get("/api/overtime?employee_id=b").get_json()
    assert [r["record_id"] for r in listing["rows"]] == [record_id]
    assert listing["rows"][0]["hours"] == 1.5
    assert listing["rows"][0]["value"]["amount"] == 60

    assert client.delete(f"/api/overtime/{record_id}").status_code == 200
    assert client.delete(f"/api/overtime/{record_id}").status_code == 404


def test_overtime_zero_hours_rejected(client):
    res = client.post(
        "/api/overtime",
        json={"employee_id": "a", "date": "2024-01-07", "start_time": "18:00", "end_time": "18:00", "service_type": "60%"},
    )
    assert res.status_code == 400


def test_overtime_listing_sort(client):
    body = client.get("/api/overtime?sort=date&direction=ascending").get_json()
    assert [r["date"] for r in body["rows"]] == ["2024-01-05", "2024-01-06"]
    assert client.get("/api/overtime?sort=salary").status_code == 400


def test_employee_batch_import(client):
    res = client.post("/api/employees/batch", json={"text": "c03\tcarla dias\t3.300,00\na01\tdup\t1000"})

    body = res.get_json()
    assert len(body["imported"]) == 1
    assert len(body["rejected"]) == 1
    names = [e["name"] for e in client.get("/api/employees?status=all").get_json()]
    assert "CARLA DIAS" in names


def test_overtime_batch_preview(client):
    res = client.post(
        "/api/overtime/batch/preview",
        json={"text": "ANA SOUZA\t07/01/2024\t18:00:00\t19:00:00\t60\nNINGUEM\t07/01/2024\t18:00:00\t19:00:00\t60"},
    )

    body = res.get_json()
    assert [r["status"] for r in body] == ["valid", "invalid"]
    assert body[0]["date"] == "2024-01-07"


def test_export_xlsx(client):
    res = client.get("/api/overtime/export.xlsx")
    assert res.status_code == 200
    assert res.mimetype.endswith("spreadsheetml.sheet")
