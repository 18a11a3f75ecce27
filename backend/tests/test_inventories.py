"""Inventory photo patch and the one-inventory-per-apartment constraint."""

from __future__ import annotations

from typing import Any

from fastapi.testclient import TestClient


def _inventory(client: TestClient, **fields: Any) -> dict[str, Any]:
    payload = {"stock": 3, "status": "AVAILABLE", **fields}
    response = client.post("/api/inventories", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_photo_patch_with_quoted_body_changes_only_the_photo(client: TestClient) -> None:
    for _ in range(4):
        _inventory(client, stock=1)
    target = _inventory(client, photoUrl="http://x/old.png")
    assert target["id"] == 5

    response = client.patch(
        "/api/inventories/5/photo",
        content='"http://x/img.png"',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 200, response.text
    patched = response.json()
    assert patched["photoUrl"] == "http://x/img.png"
    assert patched["stock"] == 3
    assert {k: v for k, v in patched.items() if k != "photoUrl"} == {
        k: v for k, v in target.items() if k != "photoUrl"
    }
    assert client.get("/api/inventories/5").json() == patched


def test_photo_patch_accepts_plain_text(client: TestClient) -> None:
    target = _inventory(client)

    response = client.patch(
        f"/api/inventories/{target['id']}/photo",
        content="http://x/plain.png",
        headers={"Content-Type": "text/plain"},
    )

    assert response.status_code == 200
    assert response.json()["photoUrl"] == "http://x/plain.png"


def test_photo_patch_on_unknown_inventory_is_not_found(client: TestClient) -> None:
    response = client.patch("/api/inventories/77/photo", content="http://x/img.png")

    assert response.status_code == 404


def test_photo_patch_keeps_apartment_reference(client: TestClient) -> None:
    apartment = client.post(
        "/api/apartments",
        json={"location": "Lakeview", "price": 1200.0, "size": 850},
    ).json()
    target = _inventory(client, apartment={"id": apartment["id"]})

    patched = client.patch(f"/api/inventories/{target['id']}/photo", content="http://x/p.png").json()

    assert patched["apartment"] == apartment


def test_second_inventory_for_same_apartment_conflicts(client: TestClient) -> None:
    apartment = client.post(
        "/api/apartments",
        json={"location": "Lakeview", "price": 1200.0, "size": 850},
    ).json()
    _inventory(client, apartment={"id": apartment["id"]})

    response = client.post("/api/inventories", json={"stock": 1, "apartment": {"id": apartment["id"]}})

    assert response.status_code == 409
    assert "detail" in response.json()


def test_omitted_stock_defaults_to_zero(client: TestClient) -> None:
    created = client.post("/api/inventories", json={"status": "EMPTY"}).json()

    assert created["stock"] == 0
    assert created["apartment"] is None


def test_photo_patch_with_undecodable_body_is_bad_request(client: TestClient) -> None:
    target = _inventory(client, photoUrl="http://x/keep.png")

    response = client.patch(f"/api/inventories/{target['id']}/photo", content=b"\xff\xfe")

    assert response.status_code == 400
    assert client.get(f"/api/inventories/{target['id']}").json()["photoUrl"] == "http://x/keep.png"


def test_photo_patch_stores_unquoted_body_unchanged(client: TestClient) -> None:
    target = _inventory(client)
    body = "  http://x/spaced.png\n"

    response = client.patch(
        f"/api/inventories/{target['id']}/photo",
        content=body,
        headers={"Content-Type": "text/plain"},
    )

    assert response.status_code == 200
    assert response.json()["photoUrl"] == body


def test_photo_patch_out_of_range_id_is_rejected(client: TestClient) -> None:
    response = client.patch(f"/api/inventories/{2**63}/photo", content="http://x/img.png")

    assert response.status_code == 422
