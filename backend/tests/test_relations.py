"""Weak references between resources: embedding, missing targets, deletes."""

from __future__ import annotations

from typing import Any

from fastapi.testclient import TestClient

from rental_api.db.orm_registry import Base, import_all_models


def _post(client: TestClient, resource: str, payload: dict[str, Any]) -> dict[str, Any]:
    response = client.post(f"/api/{resource}", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def _booking(client: TestClient) -> dict[str, Any]:
    apartment = _post(client, "apartments", {"location": "Lakeview", "price": 1200.0, "size": 850})
    user = _post(
        client,
        "users",
        {"username": "tenant", "email": "tenant@example.com", "password": "secret", "role": "USER"},
    )
    return _post(
        client,
        "bookings",
        {
            "user": {"id": user["id"]},
            "apartment": {"id": apartment["id"]},
            "bookingDate": "2026-02-01T12:00:00",
            "status": "CONFIRMED",
        },
    )


def test_booking_embeds_user_and_apartment(client: TestClient) -> None:
    booking = _booking(client)

    assert booking["user"]["username"] == "tenant"
    assert booking["apartment"]["location"] == "Lakeview"
    assert booking["bookingDate"] == "2026-02-01T12:00:00"


def test_installment_plan_embeds_payment_chain(client: TestClient) -> None:
    booking = _booking(client)
    payment = _post(
        client,
        "payments",
        {"booking": {"id": booking["id"]}, "amount": 1200.0, "status": "COMPLETED"},
    )

    plan = _post(
        client,
        "installment-plans",
        {"payment": {"id": payment["id"]}, "installments": 3, "monthlyAmount": 400.0},
    )

    assert plan["payment"]["id"] == payment["id"]
    assert plan["payment"]["booking"]["apartment"]["location"] == "Lakeview"
    assert plan["payment"]["booking"]["user"]["email"] == "tenant@example.com"


def test_reference_to_missing_row_conflicts(client: TestClient) -> None:
    response = client.post(
        "/api/feedbacks",
        json={"user": {"id": 404}, "rating": 1, "comment": "ghost"},
    )

    assert response.status_code == 409
    assert client.get("/api/feedbacks").status_code == 204


def test_update_can_drop_a_reference(client: TestClient) -> None:
    booking = _booking(client)

    response = client.put(f"/api/bookings/{booking['id']}", json={"status": "CANCELLED"})

    assert response.status_code == 200
    updated = response.json()
    assert updated["user"] is None
    assert updated["apartment"] is None
    assert updated["bookingDate"] is None
    assert updated["status"] == "CANCELLED"


def test_deleting_referenced_apartment_clears_the_reference(client: TestClient) -> None:
    booking = _booking(client)
    apartment_id = booking["apartment"]["id"]

    assert client.delete(f"/api/apartments/{apartment_id}").status_code == 204

    after = client.get(f"/api/bookings/{booking['id']}")
    assert after.status_code == 200
    assert after.json()["apartment"] is None
    assert after.json()["user"] == booking["user"]


def test_every_reference_clears_on_target_delete() -> None:
    import_all_models()
    foreign_keys = [fk for table in Base.metadata.tables.values() for fk in table.foreign_keys]

    assert len(foreign_keys) == 7
    assert {fk.ondelete for fk in foreign_keys} == {"SET NULL"}


def test_deleting_user_keeps_feedback_with_cleared_author(client: TestClient) -> None:
    booking = _booking(client)
    feedback = _post(
        client,
        "feedbacks",
        {"user": {"id": booking["user"]["id"]}, "apartment": {"id": booking["apartment"]["id"]}, "rating": 5},
    )

    assert client.delete(f"/api/users/{booking['user']['id']}").status_code == 204

    after = client.get(f"/api/feedbacks/{feedback['id']}").json()
    assert after["user"] is None
    assert after["apartment"] == booking["apartment"]
    assert after["rating"] == 5
