"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from eventbook.api import create_application
from eventbook.errors import ConfigurationError


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    app = create_application()
    with TestClient(app) as client:
        yield client


@pytest.fixture
def created_event(client, event_data) -> dict:
    response = client.post("/api/events", json=event_data)
    assert response.status_code == 201
    return response.json()


def test_create_application_requires_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(ConfigurationError):
        create_application()


def test_health_check(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["database"] == "connected"


def test_create_event(created_event):
    assert created_event["slug"] == "my-big-event"
    assert created_event["date"] == "2025-11-07T00:00:00.000Z"
    assert created_event["time"] == "10:00-12:30"
    assert created_event["createdAt"] is not None


def test_get_event_by_slug(client, created_event):
    response = client.get("/api/events/my-big-event")

    assert response.status_code == 200
    assert response.json()["id"] == created_event["id"]


def test_get_unknown_event(client):
    response = client.get("/api/events/nope")

    assert response.status_code == 404


def test_list_events(client, created_event):
    response = client.get("/api/events")

    assert response.status_code == 200
    assert [event["slug"] for event in response.json()] == ["my-big-event"]


def test_duplicate_event_conflicts(client, created_event, event_data):
    response = client.post("/api/events", json={**event_data, "title": "MY BIG EVENT"})

    assert response.status_code == 409
    assert response.json()["field"] == "slug"


def test_invalid_time_is_rejected(client, event_data):
    response = client.post("/api/events", json={**event_data, "time": "25:00"})

    assert response.status_code == 422
    body = response.json()
    assert body["field"] == "time"
    assert "25:00" in body["detail"]


def test_patch_event(client, created_event):
    response = client.patch(
        f"/api/events/{created_event['id']}",
        json={"title": "Renamed", "time": "9:00 AM"},
    )

    assert response.status_code == 200
    assert response.json()["slug"] == "renamed"
    assert response.json()["time"] == "09:00"


def test_create_booking(client, created_event):
    response = client.post(
        "/api/bookings",
        json={"eventId": created_event["id"], "email": " Guest@Example.com"},
    )

    assert response.status_code == 201
    assert response.json()["email"] == "guest@example.com"
    assert response.json()["eventId"] == created_event["id"]

    bookings = client.get(f"/api/events/{created_event['id']}/bookings").json()
    assert [b["email"] for b in bookings] == ["guest@example.com"]


def test_booking_for_missing_event(client, created_event):
    response = client.post(
        "/api/bookings",
        json={"eventId": created_event["id"] + 1, "email": "guest@example.com"},
    )

    assert response.status_code == 422
    assert response.json()["detail"] == "Referenced event does not exist."

    bookings = client.get(f"/api/events/{created_event['id']}/bookings").json()
    assert bookings == []


def test_delete_event(client, created_event):
    response = client.delete(f"/api/events/{created_event['id']}")

    assert response.status_code == 204
    assert client.get("/api/events/my-big-event").status_code == 404


def test_create_event_rejects_unknown_field(client, event_data):
    response = client.post("/api/events", json={**event_data, "slug": "hand-made"})

    assert response.status_code == 422
    assert client.get("/api/events").json() == []


def test_create_event_with_out_of_range_date_is_rejected(client, event_data):
    response = client.post("/api/events", json={**event_data, "date": "0001-01-01T00:00:00+05:00"})

    assert response.status_code == 422
    assert response.json()["field"] == "date"


def test_patch_event_rejects_null_field(client, created_event):
    response = client.patch(f"/api/events/{created_event['id']}", json={"title": None})

    assert response.status_code == 422
    assert response.json()["field"] == "title"
    assert client.get("/api/events/my-big-event").json()["title"] == "My Big Event!!"
