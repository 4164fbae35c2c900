from __future__ import annotations

import re

import pytest


def test_department_create_scenario(client):
    resp = client.post("/api/departments", json={"name": "Sales", "outlet": "HQ"})

    assert resp.status_code == 201
    body = resp.get_json()
    assert re.fullmatch(r"dept-\d+", body["id"])
    assert body["description"] == ""
    assert body["outlet"] == "HQ"
    assert client.get("/api/departments").get_json() == [body]


def test_delete_missing_department_is_404(client):
    resp = client.delete("/api/departments/dept-1")

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Department not found"}


def test_employee_lifecycle(client):
    created = client.post("/api/employees", json={"name": "Alice", "outlet": "North"})
    assert created.status_code == 201
    emp = created.get_json()
    assert emp["email"] == ""

    patched = client.patch(f"/api/employees/{emp['id']}", json={"department": "Kitchen"})
    assert patched.status_code == 200
    assert patched.get_json()["department"] == "Kitchen"
    assert patched.get_json()["outlet"] == "North"

    deleted = client.delete(f"/api/employees/{emp['id']}")
    assert deleted.status_code == 200
    assert deleted.get_json() == {"success": True}
    assert client.get("/api/employees").get_json() == []


def test_employee_create_without_name_is_400(client):
    resp = client.post("/api/employees", json={"email": "a@example.com"})

    assert resp.status_code == 400
    assert "name" in resp.get_json()["error"]


def test_patch_without_fields_is_400(client):
    emp = client.post("/api/employees", json={"name": "Alice"}).get_json()

    resp = client.patch(f"/api/employees/{emp['id']}", json={})

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "No fields to update"}


def test_patch_missing_employee_is_404(client):
    resp = client.patch("/api/employees/emp-404", json={"name": "x"})

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Employee not found"}


def test_attendance_upsert_returns_created_then_ok(client):
    emp = client.post("/api/employees", json={"name": "Alice", "outlet": "North"}).get_json()
    payload = {"employeeId": emp["id"], "date": "2024-01-01", "status": "present"}

    first = client.post("/api/attendance", json=payload)
    second = client.post("/api/attendance", json=payload)

    assert first.status_code == 201
    assert second.status_code == 200
    assert first.get_json() == {
        "id": f"{emp['id']}-2024-01-01",
        "employeeId": emp["id"],
        "date": "2024-01-01",
        "status": "present",
        "outlet": "North",
    }
    listed = client.get("/api/attendance").get_json()
    assert listed == [second.get_json()]


def test_delete_employee_cascades_to_attendance(client):
    emp = client.post("/api/employees", json={"name": "Alice"}).get_json()
    client.post("/api/attendance", json={"employeeId": emp["id"], "date": "2024-01-01", "status": "present"})

    client.delete(f"/api/employees/{emp['id']}")

    assert client.get("/api/attendance").get_json() == []


def test_delete_missing_attendance_is_404(client):
    resp = client.delete("/api/attendance/emp-1/2024-01-01")

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Attendance record not found"}


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/api/employees"),
        ("post", "/api/employees"),
        ("patch", "/api/employees/emp-1"),
        ("delete", "/api/employees/emp-1"),
        ("get", "/api/departments"),
        ("post", "/api/departments"),
        ("delete", "/api/departments/dept-1"),
        ("get", "/api/attendance"),
        ("post", "/api/attendance"),
        ("delete", "/api/attendance/emp-1/2024-01-01"),
    ],
)
def test_data_endpoints_without_database_are_503(offline_client, method, path):
    resp = getattr(offline_client, method)(path, json={})

    assert resp.status_code == 503
    assert resp.get_json() == {"error": "Database not available"}


def test_health_and_test_probes(client, offline_client):
    assert client.get("/health").get_json()["database"] == "connected"

    resp = offline_client.get("/api/test")
    body = resp.get_json()
    assert resp.status_code == 200
    assert body["message"] == "API is working"
    assert body["database"] == "not connected"
    assert body["timestamp"].endswith("Z")


def test_frontend_missing_serves_diagnostic_page(client):
    resp = client.get("/some/client/route")

    assert resp.status_code == 404
    assert b"Application Error" in resp.data


def test_frontend_serves_index_and_assets(client, static_dir):
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<html>app</html>", encoding="utf-8")
    (static_dir / "app.js").write_text("console.log(1)", encoding="utf-8")

    assert client.get("/").data == b"<html>app</html>"
    assert client.get("/employees/emp-1").data == b"<html>app</html>"
    assert client.get("/app.js").data == b"console.log(1)"


def test_attendance_for_unknown_employee_is_refused_by_store(client):
    resp = client.post("/api/attendance", json={"employeeId": "emp-404", "date": "2024-01-01", "status": "present"})

    assert resp.status_code == 500
    assert "foreign key" in resp.get_json()["error"]
    assert client.get("/api/attendance").get_json() == []


def test_frontend_path_escaping_static_dir_is_404(client, static_dir):
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<html>app</html>", encoding="utf-8")
    (static_dir.parent / "secret.txt").write_text("top secret", encoding="utf-8")

    resp = client.get("/assets/%2e%2e/%2e%2e/secret.txt")

    assert resp.status_code == 404
    assert b"top secret" not in resp.data
    assert b"Server Error" not in resp.data
