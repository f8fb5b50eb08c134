import json
import uuid
from datetime import timedelta


def _dump(record) -> dict:
    return record.model_dump(mode="json")


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


# ---------------------------------------------------------------------------
# Bookings
# ---------------------------------------------------------------------------


def test_booking_statuses(client):
    response = client.get("/api/v1/bookings/statuses")
    assert response.status_code == 200
    by_status = {row["status"]: row for row in response.json()}
    assert len(by_status) == 6
    assert by_status["pending"]["color"] == "yellow"
    assert by_status["confirmed"]["transitions"] == ["checked_in", "cancelled", "no_show"]
    assert by_status["cancelled"]["is_terminal"] is True


def test_booking_draft(client):
    response = client.post("/api/v1/bookings/drafts", json={
        "park_id": str(uuid.uuid4()),
        "visit_date": "2025-06-04",
        "visit_time": "11:00",
        "adults_count": 2,
        "children_count": 3,
        "contact_name": "Айгуль",
        "contact_phone": "+996555123456",
    })
    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "pending"
    assert body["total_guests"] == 5
    assert body["booking_number"].startswith("SKP-")
    assert len(body["booking_number"]) == 12


def test_booking_draft_rejects_bad_phone(client):
    response = client.post("/api/v1/bookings/drafts", json={
        "park_id": str(uuid.uuid4()),
        "visit_date": "2025-06-04",
        "contact_name": "Айгуль",
        "contact_phone": "555-123",
    })
    assert response.status_code == 422


def test_booking_decisions(client, make_booking, now):
    booking = make_booking(visit_date=now + timedelta(hours=3))
    response = client.post("/api/v1/bookings/decisions", json={
        "booking": _dump(booking),
        "now": now.isoformat(),
    })
    assert response.status_code == 200
    body = response.json()
    assert body["can_cancel"] is True
    assert body["can_check_in"] is True
    assert body["total_guests"] == 3
    assert body["status_label"] == "Подтверждено"
    assert body["is_terminal"] is False


def test_cancel_confirmed_booking(client, make_booking, now):
    booking = make_booking(visit_date=now + timedelta(hours=3))
    response = client.post("/api/v1/bookings/cancel", json={
        "booking": _dump(booking),
        "reason": "Ребенок заболел",
        "now": now.isoformat(),
    })
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "cancelled"
    assert body["reason"] == "Ребенок заболел"
    assert body["booking_number"] == booking.booking_number


def test_cancel_too_late_is_conflict(client, make_booking, now):
    booking = make_booking(visit_date=now + timedelta(hours=1))
    response = client.post("/api/v1/bookings/cancel", json={
        "booking": _dump(booking),
        "reason": "Late",
        "now": now.isoformat(),
    })
    assert response.status_code == 409
    assert response.json()["error"] == "cancellation_not_allowed"


def test_cancel_completed_is_conflict(client, make_booking, now):
    booking = make_booking(status="completed")
    response = client.post("/api/v1/bookings/cancel", json={
        "booking": _dump(booking),
        "reason": "Changed plans",
        "now": now.isoformat(),
    })
    assert response.status_code == 409
    assert "completed" in response.json()["message"]


def test_check_in(client, make_booking, now):
    booking = make_booking(visit_date=now + timedelta(hours=1))
    response = client.post("/api/v1/admin/bookings/check-in", json={
        "booking": _dump(booking),
        "actual_children": 2,
        "now": now.isoformat(),
    })
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "checked_in"
    assert body["expected_guests"] == 3
    assert body["actual_guests"] == 4


def test_check_in_refused(client, make_booking, now):
    pending = make_booking(status="pending", visit_date=now)
    response = client.post("/api/v1/admin/bookings/check-in", json={
        "booking": _dump(pending),
        "now": now.isoformat(),
    })
    assert response.status_code == 409
    assert response.json()["error"] == "check_in_not_allowed"

    far = make_booking(visit_date=now + timedelta(days=2))
    response = client.post("/api/v1/admin/bookings/check-in", json={
        "booking": _dump(far),
        "now": now.isoformat(),
    })
    assert response.status_code == 409


# ---------------------------------------------------------------------------
# Tickets
# ---------------------------------------------------------------------------


def test_ticket_catalog(client):
    body = client.get("/api/v1/tickets/catalog").json()
    assert [s["value"] for s in body["statuses"]] == ["active", "used", "expired", "cancelled"]
    assert {t["value"]: t["label"] for t in body["types"]}["child"] == "Детский"


def test_ticket_validity(client, make_ticket, now):
    ticket = make_ticket(used_at=(now - timedelta(minutes=5)).isoformat())
    response = client.post("/api/v1/tickets/validity", json={
        "ticket": _dump(ticket),
        "now": now.isoformat(),
    })
    assert response.status_code == 200
    body = response.json()
    assert body["is_valid"] is True
    assert body["can_use"] is False
    assert body["ticket_number"] == "SKP-2025-000001"
    assert body["age_in_days"] == 2


def test_qr_payload(client, make_ticket):
    ticket = make_ticket()
    response = client.post("/api/v1/tickets/qr-payload", json=_dump(ticket))
    assert response.status_code == 200
    body = response.json()
    assert body["payload"]["qr"] == ticket.qr_code
    assert json.loads(body["data"]) == body["payload"]


def test_scan_ticket(client, make_ticket, now):
    ticket = make_ticket()
    scan = {"qr_code": ticket.qr_code, "park_id": str(uuid.uuid4()), "staff_id": str(uuid.uuid4())}
    response = client.post("/api/v1/admin/tickets/scan", json={
        "ticket": _dump(ticket),
        "scan": scan,
        "now": now.isoformat(),
    })
    assert response.status_code == 200
    body = response.json()
    assert body["can_enter"] is True
    assert body["reason"] == "ok"
    assert body["type_label"] == "Детский"


def test_scan_already_used_ticket(client, make_ticket, now):
    ticket = make_ticket(used_at=now - timedelta(minutes=30))
    scan = {"qr_code": ticket.qr_code, "park_id": str(uuid.uuid4()), "staff_id": str(uuid.uuid4())}
    body = client.post("/api/v1/admin/tickets/scan", json={
        "ticket": _dump(ticket),
        "scan": scan,
        "now": now.isoformat(),
    }).json()
    assert body["valid"] is True
    assert body["can_enter"] is False
    assert body["reason"] == "already_used"


def test_scan_with_foreign_code_is_conflict(client, make_ticket, now):
    ticket = make_ticket()
    scan = {"qr_code": "someone-elses", "park_id": str(uuid.uuid4()), "staff_id": str(uuid.uuid4())}
    response = client.post("/api/v1/admin/tickets/scan", json={
        "ticket": _dump(ticket),
        "scan": scan,
        "now": now.isoformat(),
    })
    assert response.status_code == 409
    assert response.json()["error"] == "ticket_mismatch"


def test_ticket_drafts(client):
    response = client.post("/api/v1/admin/tickets/drafts", json={
        "booking_id": str(uuid.uuid4()),
        "tickets": [
            {"type": "adult", "holder_name": "Айгуль", "price": "800"},
            {"type": "child", "holder_name": "Нурлан", "holder_age": 7, "price": "500"},
        ],
        "valid_from": "2025-06-04T09:00:00Z",
        "valid_to": "2025-06-04T21:00:00Z",
        "first_sequence": 41,
    })
    assert response.status_code == 201
    drafts = response.json()
    assert [d["ticket_number"] for d in drafts] == ["SKP-2025-000041", "SKP-2025-000042"]
    assert all(d["status"] == "active" for d in drafts)
    assert drafts[0]["qr_code"] != drafts[1]["qr_code"]


# ---------------------------------------------------------------------------
# Parks
# ---------------------------------------------------------------------------


def test_park_availability(client, make_booking, park_id):
    bookings = [
        make_booking(park_id=park_id, visit_date="2025-06-04", visit_time="10:00", adults_count=4, children_count=1),
        make_booking(park_id=park_id, visit_date="2025-06-04", visit_time="12:00", adults_count=2, children_count=3),
    ]
    response = client.post(f"/api/v1/parks/{park_id}/availability", json={
        "date": "2025-06-04",
        "total_capacity": 10,
        "time_slots": [{"time": "10:00", "capacity": 5}, {"time": "12:00", "capacity": 6}],
        "bookings": [_dump(b) for b in bookings],
    })
    assert response.status_code == 200
    body = response.json()
    assert body["current_bookings"] == 10
    assert body["available_slots"] == 0
    assert body["is_fully_booked"] is True
    slots = {s["time"]: s for s in body["time_slots"]}
    assert slots["10:00"]["is_available"] is False
    assert slots["12:00"]["available"] == 1
    assert slots["12:00"]["is_available"] is True


def test_park_availability_default_capacity(client, park_id):
    body = client.post(f"/api/v1/parks/{park_id}/availability", json={"date": "2025-06-04"}).json()
    assert body["total_capacity"] == 100
    assert body["available_slots"] == 100
    assert body["time_slots"] == []
