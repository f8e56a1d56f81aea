from __future__ import annotations

import json

import pytest

from attendance_tracker.main import create_app
from attendance_tracker.storage.memory_store import MemoryKeyValueStore


@pytest.fixture
def store():
    return MemoryKeyValueStore({"sections": b"[]"})


@pytest.fixture
def client(store):
    app = create_app("config.testing", store=store)
    return app.test_client()


def _create_section(client, name="Art"):
    resp = client.post("/api/sections", json={"name": name, "color": "#f59e0b"})
    assert resp.status_code == 201
    return resp.get_json()["section"]["id"]


def test_student_roundtrip_and_persistence(client, store):
    sid = _create_section(client)

    resp = client.post("/api/students", json={"name": "Ann", "sectionIds": [sid]})
    assert resp.status_code == 201
    student_id = resp.get_json()["student"]["id"]

    listed = client.get("/api/students?q=ANN").get_json()["students"]
    assert [s["id"] for s in listed] == [student_id]
    assert listed[0]["sections"][0]["name"] == "Art"

    saved = json.loads(store.get("students"))
    assert saved == [{"id": student_id, "name": "Ann", "sectionIds": [sid]}]


def test_validation_errors_are_400(client):
    resp = client.post("/api/students", json={"name": "Ann", "sectionIds": []})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False

    assert client.post("/api/sections", json={"name": ""}).status_code == 400


def test_attendance_mark_and_sheet(client):
    sid = _create_section(client)
    student_id = client.post("/api/students", json={"name": "Ann", "sectionIds": [sid]}).get_json()["student"]["id"]

    rows = client.get("/api/attendance?date=2024-01-01").get_json()["rows"]
    assert rows[0]["present"] is False
    assert rows[0]["mark"] == "unmarked"

    resp = client.post(
        "/api/attendance",
        json={"studentId": student_id, "sectionId": sid, "date": "2024-01-01", "present": True},
    )
    assert resp.status_code == 200

    rows = client.get(f"/api/attendance?date=2024-01-01&section={sid}").get_json()["rows"]
    assert rows[0]["present"] is True

    bad = client.post("/api/attendance", json={"studentId": student_id, "sectionId": sid, "date": "01/01/2024"})
    assert bad.status_code == 400


def test_report_and_export(client):
    sid = _create_section(client)
    student_id = client.post("/api/students", json={"name": "Ann", "sectionIds": [sid]}).get_json()["student"]["id"]
    client.post("/api/attendance", json={"studentId": student_id, "sectionId": sid, "date": "2024-01-15", "present": True})

    report = client.get("/api/reports?from=2024-01-01&to=2024-01-31&section=all").get_json()
    assert report["stats"]["totalRecords"] == 1
    assert report["stats"]["rate"] == 100.0

    resp = client.get("/api/reports/export.csv?from=2024-01-01&to=2024-01-31")
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attendance_report_" in resp.headers["Content-Disposition"]
    assert "Ann" in resp.data.decode("utf-8-sig")

    empty = client.get("/api/reports/export.pdf?from=2023-01-01&to=2023-01-31")
    assert empty.status_code == 404


def test_delete_section_cascades_over_http(client):
    sid = _create_section(client)
    student_id = client.post("/api/students", json={"name": "Ann", "sectionIds": [sid]}).get_json()["student"]["id"]
    client.post("/api/attendance", json={"studentId": student_id, "sectionId": sid, "date": "2024-01-15", "present": True})

    assert client.delete(f"/api/sections/{sid}").status_code == 200
    assert client.delete(f"/api/sections/{sid}").status_code == 404

    (ann,) = client.get("/api/students").get_json()["students"]
    assert ann["sections"] == []
    report = client.get("/api/reports?from=&to=").get_json()
    assert report["stats"]["totalRecords"] == 0


def test_preferences(client, store):
    assert client.get("/api/preferences").get_json() == {"language": "en", "theme": "light"}
    assert client.post("/api/preferences/theme/toggle").get_json()["theme"] == "dark"
    assert client.post("/api/preferences", json={"language": "pt"}).get_json()["language"] == "pt"
    assert client.post("/api/preferences", json={"language": "de"}).status_code == 400
    assert store.get("language") == b"pt"
    assert store.get("theme") == b"dark"


def test_section_ids_as_string_is_rejected(client, store):
    sid = _create_section(client)

    resp = client.post("/api/students", json={"name": "Ann", "sectionIds": sid})

    assert resp.status_code == 400
    assert client.get("/api/students").get_json()["students"] == []
    assert json.loads(store.get("students")) == []


def test_non_text_fields_are_400_not_500(client):
    sid = _create_section(client)

    assert client.post("/api/students", json={"name": 5, "sectionIds": [sid]}).status_code == 400
    assert client.post("/api/sections", json={"name": "Art", "color": 5}).status_code == 400
    assert client.post("/api/sections", json={"name": ["Art"]}).status_code == 400


def test_present_must_be_a_json_boolean(client):
    sid = _create_section(client)
    student_id = client.post("/api/students", json={"name": "Ann", "sectionIds": [sid]}).get_json()["student"]["id"]
    mark = {"studentId": student_id, "sectionId": sid, "date": "2024-01-01"}

    for bad in ("false", "true", 1, None):
        resp = client.post("/api/attendance", json={**mark, "present": bad})
        assert resp.status_code == 400, bad
    assert client.post("/api/attendance", json=mark).status_code == 400

    rows = client.get("/api/attendance?date=2024-01-01").get_json()["rows"]
    assert rows[0]["mark"] == "unmarked"

    assert client.post("/api/attendance", json={**mark, "present": False}).status_code == 200
    rows = client.get("/api/attendance?date=2024-01-01").get_json()["rows"]
    assert rows[0]["mark"] == "absent"


def test_attendance_sheet_rejects_bad_dates(client):
    assert client.get("/api/attendance?date=garbage").status_code == 400
    assert client.get("/api/attendance?date=2024-1-5").status_code == 400
    assert client.get("/api/attendance?date=2024-01-05").status_code == 200
