from __future__ import annotations

import csv
import io


def test_gateway_forwards_to_dispatcher(client):
    res = client.get("/api/users?role=admin")

    assert res.status_code == 200
    assert [u["username"] for u in res.get_json()] == ["admin"]


def test_gateway_login_round_trip(client):
    ok = client.post("/api/login", json={"username": "Admin", "password": "admin123"})
    bad = client.post("/api/login", json={"username": "admin", "password": "nope"})

    assert ok.status_code == 200
    assert ok.get_json()["role"] == "admin"
    assert bad.status_code == 401
    assert bad.get_json() == {"message": "Invalid credentials"}


def test_gateway_unknown_route(client):
    res = client.get("/api/unknown")

    assert res.status_code == 404
    assert res.get_json() == {"message": "Mock for GET /api/unknown not found."}


def test_admin_reset_restores_store(client):
    client.post("/api/enrollments", json={"studentId": 101, "courseId": "MCA101"})
    assert len(client.get("/api/enrollments").get_json()) == 1

    res = client.post("/admin/reset")

    assert res.status_code == 200
    assert client.get("/api/enrollments").get_json() == []


def test_attendance_csv_report(client):
    res = client.get("/reports/attendance.csv?department=CSE&startDate=2025-01-15&endDate=2025-01-31")

    assert res.status_code == 200
    assert res.mimetype == "text/csv"
    assert "attendance_20250115_20250131.csv" in res.headers["Content-Disposition"]

    text = res.data.decode("utf-8-sig")
    rows = list(csv.DictReader(io.StringIO(text)))
    assert text.splitlines()[0] == (
        "date,student_id,registration_number,student_name,department,"
        "subject_code,subject,instructor,time,status,notes"
    )
    assert len(rows) == 40
    assert {r["department"] for r in rows} == {"CSE"}


def test_attendance_csv_rejects_bad_dates(client):
    res = client.get("/reports/attendance.csv?startDate=15-01-2025")

    assert res.status_code == 400


def test_gateway_decodes_path_once(client):
    client.post(
        "/api/attendance",
        json={"studentId": 101, "classId": "A%25B", "date": "2025-03-01", "status": "present"},
    )

    res = client.get("/api/attendance/class/A%2525B/date/2025-03-01")

    assert res.status_code == 200
    assert [r["classId"] for r in res.get_json()] == ["A%25B"]
