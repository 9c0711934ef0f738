"""
Tests for the HTTP surface: routes, status codes and middleware
"""

import uuid

from app.core.config import settings
from app.models import Activity, Event

def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}

def test_list_activities_empty(client):
    response = client.get("/api/activities")
    assert response.status_code == 200
    assert response.json() == []

def test_create_and_get_activity(client):
    response = client.post("/api/activities", json={"title": "Test", "city": "London", "venue": "X"})
    assert response.status_code == 201
    created = response.json()
    uuid.UUID(created["id"])

    response = client.get(f"/api/activities/{created['id']}")
    assert response.status_code == 200
    body = response.json()
    assert (body["title"], body["city"], body["venue"]) == ("Test", "London", "X")
    assert body["isCancelled"] is False

def test_create_activity_missing_required_fields_is_bad_request(client):
    response = client.post("/api/activities", json={"title": "No place"})
    assert response.status_code == 400
    body = response.json()
    assert body["error_code"] == "bad_request"
    assert body["details"]

def test_create_activity_with_null_body_is_bad_request(client):
    response = client.post(
        "/api/activities", content="null", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert client.get("/api/activities").json() == []

def test_get_missing_activity_returns_404(client):
    response = client.get(f"/api/activities/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.json()["error_code"] == "not_found"

def test_update_activity_returns_204(client, sample_activity):
    response = client.put(
        f"/api/activities/{sample_activity.id}",
        json={"id": sample_activity.id, "title": "Renamed", "city": ""},
    )
    assert response.status_code == 204

    body = client.get(f"/api/activities/{sample_activity.id}").json()
    assert body["title"] == "Renamed"
    assert body["city"] == "Seattle"

def test_update_activity_can_uncancel(client, sample_activity):
    url = f"/api/activities/{sample_activity.id}"
    assert client.put(url, json={"id": sample_activity.id, "isCancelled": True}).status_code == 204
    assert client.put(url, json={"id": sample_activity.id, "isCancelled": False}).status_code == 204

    assert client.get(url).json()["isCancelled"] is False

def test_update_activity_id_mismatch_returns_400_without_change(client, sample_activity, db_session):
    response = client.put(
        f"/api/activities/{sample_activity.id}",
        json={"id": str(uuid.uuid4()), "title": "Hijacked"},
    )
    assert response.status_code == 400

    db_session.expire_all()
    assert db_session.get(Activity, sample_activity.id).title == "Board Game Night"

def test_update_missing_activity_returns_404(client):
    missing = str(uuid.uuid4())
    response = client.put(f"/api/activities/{missing}", json={"id": missing, "title": "Ghost"})
    assert response.status_code == 404

def test_delete_activity(client, sample_activity):
    assert client.delete(f"/api/activities/{sample_activity.id}").status_code == 204
    assert client.delete(f"/api/activities/{sample_activity.id}").status_code == 404

def test_bulk_delete_activities(client, sample_activity):
    response = client.delete("/api/activities", params={"ids": [sample_activity.id]})
    assert response.status_code == 200
    assert [a["id"] for a in response.json()] == [sample_activity.id]

def test_export_activities_xlsx(client, sample_activity):
    response = client.get("/api/activities/export")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    assert "activities.xlsx" in response.headers["content-disposition"]
    assert response.content[:2] == b"PK"

def test_export_activities_csv(client, sample_activity):
    response = client.get("/api/activities/export/csv")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "activities.csv" in response.headers["content-disposition"]

def test_create_and_get_event(client):
    payload = {
        "eventName": "Jazz Night",
        "eventDescription": "Live trio",
        "location": "Blue Note",
        "groupName": "Jazz Lovers",
        "organizers": [{"firstName": "Ella", "lastName": "Fitzgerald"}],
        "tags": [{"tagName": "Music"}],
    }
    response = client.post("/api/events", json=payload)
    assert response.status_code == 201
    created = response.json()
    assert created["groupName"] == "Jazz Lovers"
    assert created["organizers"][0]["firstName"] == "Ella"
    assert created["tags"][0]["tagName"] == "Music"

    response = client.get(f"/api/events/{created['eventId']}")
    assert response.status_code == 200
    assert response.json()["eventName"] == "Jazz Night"

def test_create_event_rejects_blank_tag_name(client):
    payload = {
        "eventName": "Jazz Night",
        "groupName": "Jazz Lovers",
        "organizers": [{"firstName": "Ella", "lastName": "Fitzgerald"}],
        "tags": [{"tagName": "  "}],
    }
    assert client.post("/api/events", json=payload).status_code == 400

def test_create_incomplete_event_is_bad_request(client):
    response = client.post("/api/events", json={"eventName": "Launch"})
    assert response.status_code == 400
    assert response.json()["error_code"] == "bad_request"

def test_list_events(client, sample_event):
    response = client.get("/api/events")
    assert response.status_code == 200
    events = response.json()
    assert len(events) == 1
    assert events[0]["eventId"] == str(sample_event.event_id)
    assert events[0]["registration"][0]["firstName"] == "Jane"

def test_update_event_returns_204(client, sample_event):
    event_id = str(sample_event.event_id)
    response = client.put(f"/api/events/{event_id}", json={"eventId": event_id, "location": "Moved"})
    assert response.status_code == 204
    assert client.get(f"/api/events/{event_id}").json()["location"] == "Moved"

def test_update_event_id_mismatch_returns_400(client, sample_event):
    response = client.put(
        f"/api/events/{sample_event.event_id}",
        json={"eventId": str(uuid.uuid4()), "location": "Moved"},
    )
    assert response.status_code == 400

def test_update_missing_event_returns_404_and_logs(client, caplog):
    missing = str(uuid.uuid4())
    response = client.put(f"/api/events/{missing}", json={"eventId": missing, "eventName": "Ghost"})
    assert response.status_code == 404
    assert "not found for update" in caplog.text

def test_delete_event(client, sample_event, db_session):
    assert client.delete(f"/api/events/{sample_event.event_id}").status_code == 204
    assert client.delete(f"/api/events/{sample_event.event_id}").status_code == 404
    assert db_session.query(Event).count() == 0

def test_get_event_with_malformed_id_is_bad_request(client):
    assert client.get("/api/events/not-a-guid").status_code == 400

def test_export_events_csv(client, sample_event):
    response = client.get("/api/events/export/csv")
    assert response.status_code == 200
    assert "events.csv" in response.headers["content-disposition"]
    lines = response.text.strip("\n").split("\n")
    assert lines[0].startswith("EventId,EventName")
    assert len(lines) == 2

def test_export_events_xlsx(client, sample_event):
    response = client.get("/api/events/export")
    assert response.status_code == 200
    assert "events.xlsx" in response.headers["content-disposition"]

def test_security_headers_present(client):
    response = client.get("/api/activities")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert "Content-Security-Policy" in response.headers

def test_rate_limit_returns_429_with_retry_after(client, monkeypatch):
    monkeypatch.setattr(settings, "RATE_LIMIT_PER_MINUTE", 2)

    assert client.get("/api/activities").status_code == 200
    assert client.get("/api/activities").status_code == 200
    response = client.get("/api/activities")

    assert response.status_code == 429
    assert int(response.headers["Retry-After"]) >= 1
    assert client.get("/health").status_code == 200
