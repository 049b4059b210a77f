"""End-to-end tests covering REST flows."""
from __future__ import annotations

from datetime import date

import pytest
from fastapi import status

from app.api.dependencies import get_invoice_repository
from app.repositories.invoice import InvoiceRepository

EVENT_ID = "6f1c2a4e-0000-4000-8000-000000000001"
USER_ID = "9a7d3b2c-0000-4000-8000-000000000002"


def _invoice_payload(invoice_number: str, **overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "invoice_number": invoice_number,
        "event_id": EVENT_ID,
        "event_name": "Spring Gala",
        "user_id": USER_ID,
        "user_name": "Sam Lee",
        "amount": 100.0,
        "issue_date": "2025-01-01",
        "due_date": "2025-01-31",
    }
    payload.update(overrides)
    return payload


def _update_payload(invoice: dict[str, object], **overrides: object) -> dict[str, object]:
    payload = {
        "id": invoice["id"],
        "event_name": invoice["event_name"],
        "user_name": invoice["user_name"],
        "amount": invoice["amount"],
        "due_date": invoice["due_date"],
        "status": invoice["status"],
        "description": invoice["description"],
    }
    payload.update(overrides)
    return payload


def test_health_endpoint(client) -> None:
    response = client.get("/api/health")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_invoice_lifecycle(client) -> None:
    create_resp = client.post("/api/invoices", json=_invoice_payload("INV-100"))
    assert create_resp.status_code == status.HTTP_201_CREATED
    created = create_resp.json()["result"]
    assert created["status"] == "Draft"
    assert created["amount"] == 100.0

    update_resp = client.put(
        f"/api/invoices/{created['id']}",
        json=_update_payload(created, status="Paid"),
    )
    assert update_resp.status_code == status.HTTP_200_OK
    assert update_resp.json()["result"]["status"] == "Paid"

    paid = client.get("/api/invoices/status/Paid").json()["result"]
    assert [item["id"] for item in paid] == [created["id"]]
    assert client.get("/api/invoices/status/Draft").json()["result"] == []

    by_number = client.get("/api/invoices/number/INV-100").json()["result"]
    assert by_number["id"] == created["id"]
    assert by_number["issue_date"] == "2025-01-01"


def test_duplicate_invoice_number_is_rejected(client) -> None:
    first = client.post("/api/invoices", json=_invoice_payload("INV-200"))
    second = client.post("/api/invoices", json=_invoice_payload("INV-200", amount=50.0))

    assert first.status_code == status.HTTP_201_CREATED
    assert second.status_code == status.HTTP_400_BAD_REQUEST
    assert second.json() == {"success": False, "error": "Invoice could not be created"}

    listed = client.get("/api/invoices").json()["result"]
    assert [item["amount"] for item in listed] == [100.0]


def test_delete_twice_returns_404_second_time(client) -> None:
    created = client.post("/api/invoices", json=_invoice_payload("INV-300")).json()["result"]

    first = client.delete(f"/api/invoices/{created['id']}")
    second = client.delete(f"/api/invoices/{created['id']}")

    assert first.status_code == status.HTTP_200_OK
    assert first.json() == {"success": True, "message": "Invoice deleted successfully"}
    assert second.status_code == status.HTTP_404_NOT_FOUND
    assert client.get(f"/api/invoices/{created['id']}").status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.parametrize("status_name", ["sent", "SENT", "Sent"])
def test_status_filter_is_case_insensitive(client, status_name) -> None:
    created = client.post("/api/invoices", json=_invoice_payload("INV-400")).json()["result"]
    client.put(f"/api/invoices/{created['id']}", json=_update_payload(created, status="Sent"))

    response = client.get(f"/api/invoices/status/{status_name}")

    assert [item["id"] for item in response.json()["result"]] == [created["id"]]


def test_unknown_status_filter_returns_empty_list(client) -> None:
    client.post("/api/invoices", json=_invoice_payload("INV-450"))

    response = client.get("/api/invoices/status/Archived")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "result": []}


def test_update_with_unknown_status_is_404_and_leaves_invoice(client) -> None:
    created = client.post("/api/invoices", json=_invoice_payload("INV-500")).json()["result"]

    response = client.put(
        f"/api/invoices/{created['id']}",
        json=_update_payload(created, status="Archived", amount=999.0),
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND
    unchanged = client.get(f"/api/invoices/{created['id']}").json()["result"]
    assert unchanged["amount"] == 100.0
    assert unchanged["status"] == "Draft"


def test_update_id_mismatch_is_400(client) -> None:
    created = client.post("/api/invoices", json=_invoice_payload("INV-550")).json()["result"]

    response = client.put("/api/invoices/some-other-id", json=_update_payload(created))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"success": False, "error": "Invalid data"}


def test_invalid_payload_is_400(client) -> None:
    response = client.post("/api/invoices", json=_invoice_payload("INV-600", amount=-5))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"success": False, "error": "Invalid data"}
    assert client.get("/api/invoices").json()["result"] == []


@pytest.mark.parametrize("amount", [1e30, 0.004])
def test_create_with_unstorable_amount_is_400(client, amount) -> None:
    response = client.post("/api/invoices", json=_invoice_payload("INV-650", amount=amount))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"success": False, "error": "Invalid data"}
    assert client.get("/api/invoices").json()["result"] == []


@pytest.mark.parametrize("amount", [1e30, 0.004])
def test_update_with_unstorable_amount_is_400(client, amount) -> None:
    created = client.post("/api/invoices", json=_invoice_payload("INV-660")).json()["result"]

    response = client.put(
        f"/api/invoices/{created['id']}",
        json=_update_payload(created, amount=amount),
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"success": False, "error": "Invalid data"}
    assert client.get(f"/api/invoices/{created['id']}").json()["result"]["amount"] == 100.0


def test_event_and_user_filters(client) -> None:
    client.post("/api/invoices", json=_invoice_payload("INV-700"))
    client.post("/api/invoices", json=_invoice_payload("INV-701", event_id="event-x", user_id="user-x"))

    by_event = client.get(f"/api/invoices/event/{EVENT_ID}").json()["result"]
    by_user = client.get("/api/invoices/user/user-x").json()["result"]

    assert [item["invoice_number"] for item in by_event] == ["INV-700"]
    assert [item["invoice_number"] for item in by_user] == ["INV-701"]


def test_overdue_listing_uses_repository_clock(client, session) -> None:
    client.app.dependency_overrides[get_invoice_repository] = lambda: InvoiceRepository(
        session, today=lambda: date(2025, 7, 1)
    )
    late = client.post("/api/invoices", json=_invoice_payload("INV-800", due_date="2025-06-01")).json()["result"]
    later = client.post("/api/invoices", json=_invoice_payload("INV-801", due_date="2025-03-01")).json()["result"]
    paid = client.post("/api/invoices", json=_invoice_payload("INV-802", due_date="2025-01-15")).json()["result"]
    client.post("/api/invoices", json=_invoice_payload("INV-803", due_date="2025-07-01"))
    client.put(f"/api/invoices/{paid['id']}", json=_update_payload(paid, status="Paid"))

    response = client.get("/api/invoices/overdue")

    assert response.status_code == status.HTTP_200_OK
    assert [item["id"] for item in response.json()["result"]] == [later["id"], late["id"]]


def test_unknown_route_uses_error_envelope(client) -> None:
    response = client.get("/api/nothing-here")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["success"] is False
