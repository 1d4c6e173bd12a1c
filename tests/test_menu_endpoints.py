"""Tests for menu promotion endpoints."""

from fastapi.testclient import TestClient

from restocafe.api.app import create_app


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_today_specials_uses_restaurant_clock(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/menu/specials/today")

    assert response.status_code == 200
    specials = response.json()["specials"]
    assert [entry["id"] for entry in specials] == ["special-1"]
    assert specials[0]["name"] == "Margherita Pizza"
    assert specials[0]["day"] == "Monday"
    assert specials[0]["price"] == 239.2


def test_today_specials_converts_aware_instant(container) -> None:
    client = TestClient(create_app(container))

    # 10:00 UTC is 15:30 in Kolkata.
    response = client.get(
        "/menu/specials/today", params={"at": "2026-10-20T10:00:00+00:00"}
    )

    assert [entry["id"] for entry in response.json()["specials"]] == ["special-2"]


def test_specials_for_day(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/menu/specials/0")

    assert response.status_code == 200
    data = response.json()
    assert data["day"] == "Sunday"
    assert [entry["id"] for entry in data["specials"]] == ["special-7"]


def test_specials_for_invalid_day(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/menu/specials/9")

    assert response.status_code == 404


def test_happy_hours_schedule(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/menu/happy-hours", params={"at": "2026-10-19T18:00:00"})

    assert response.status_code == 200
    by_id = {entry["id"]: entry for entry in response.json()["happy_hours"]}
    assert by_id["hh-1"]["running"] is True
    assert by_id["hh-1"]["starts_in"] == {"hours": 0, "minutes": 0, "total_minutes": 0}
    assert by_id["hh-1"]["time_range"] == "17:00 - 19:00"
    assert by_id["hh-3"]["running"] is False
    assert by_id["hh-3"]["starts_in"]["total_minutes"] == 5940
    assert by_id["hh-3"]["starts_in"]["hours"] == 99


def test_best_discount_for_item(container) -> None:
    client = TestClient(create_app(container))

    response = client.get(
        "/menu/items/cappuccino/best-discount", params={"at": "2026-10-19T18:00:00"}
    )

    assert response.status_code == 200
    assert response.json() == {
        "item_id": "cappuccino",
        "offer": {"price": 84.0, "discount": 36.0, "name": "Evening Happy Hour"},
    }


def test_best_discount_without_offer(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/menu/items/tiramisu/best-discount")

    assert response.status_code == 200
    assert response.json() == {"item_id": "tiramisu", "offer": None}


def test_best_discount_unknown_item(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/menu/items/unicorn-steak/best-discount")

    assert response.status_code == 404


def test_combos(container) -> None:
    client = TestClient(create_app(container))

    current = client.get("/menu/combos").json()["combos"]
    expired = client.get("/menu/combos", params={"at": "2027-01-02T12:00:00"})

    assert len(current) == 4
    assert all(combo["savings"] > 0 for combo in current)
    assert expired.json() == {"combos": []}


def test_item_customizations(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/menu/items/burger-classic/customizations")

    assert response.status_code == 200
    groups = response.json()["customizations"]
    assert [custom["id"] for custom in groups["add"]] == ["extra-cheese", "extra-sauce"]
    assert groups["remove"] == [{"id": "no-onions", "name": "No Onions", "price": 0}]


def test_quote_item_price(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/menu/items/burger-classic/price",
        json={"customizations": ["extra-cheese", "extra-sauce"], "quantity": 2},
    )

    assert response.status_code == 200
    assert response.json() == {
        "item_id": "burger-classic",
        "quantity": 2,
        "unit_price": 199,
        "price": 498,
        "customizations": "Extra Cheese (+₹30), Extra Sauce (+₹20)",
    }


def test_quote_item_rejects_unavailable_customization(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/menu/items/burger-classic/price", json={"customizations": ["extra-paneer"]}
    )
    missing = client.post("/menu/items/unicorn-steak/price", json={})

    assert response.status_code == 400
    assert response.json()["detail"] == [
        'Customization "Extra Paneer" is not available for this item'
    ]
    assert missing.status_code == 404
