from decimal import Decimal

from tests.conftest import API

PEAK_SELECTION = ["19:00", "18:00", "18:30"]


def _book(client, headers, **overrides):
    payload = {
        "groundId": 1,
        "date": "2026-10-20",
        "slots": PEAK_SELECTION,
        "useLoyalty": False,
    }
    payload.update(overrides)
    return client.post(f"{API}/bookings", json=payload, headers=headers)


def test_quote_prices_selection_with_loyalty(client, user_headers):
    response = client.post(
        f"{API}/bookings/quote",
        json={"groundId": 1, "slots": PEAK_SELECTION, "useLoyalty": True},
        headers=user_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["slots"] == ["18:00", "18:30", "19:00"]
    assert body["startTime"] == "18:00"
    assert body["endTime"] == "19:30"
    assert Decimal(body["duration"]) == Decimal("1.5")
    assert Decimal(body["basePrice"]) == Decimal("7800")
    assert Decimal(body["discount"]) == Decimal("50")
    assert Decimal(body["total"]) == Decimal("7750")


def test_quote_with_empty_selection_is_rejected(client, user_headers):
    response = client.post(
        f"{API}/bookings/quote",
        json={"groundId": 1, "slots": []},
        headers=user_headers,
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "At least one slot must be selected"}


def test_quote_with_malformed_time_is_unprocessable(client, user_headers):
    response = client.post(
        f"{API}/bookings/quote",
        json={"groundId": 1, "slots": ["18:00", "6pm"]},
        headers=user_headers,
    )

    assert response.status_code == 422
    assert "6pm" in response.json()["detail"]


def test_quote_for_unknown_ground(client, user_headers):
    response = client.post(
        f"{API}/bookings/quote",
        json={"groundId": 99, "slots": ["18:00"]},
        headers=user_headers,
    )

    assert response.status_code == 404


def test_booking_requires_authentication(client):
    assert _book(client, {}).status_code == 401


def test_create_booking_persists_server_side_totals(client, user_headers):
    response = _book(client, user_headers, useLoyalty=True)

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "confirmed"
    assert body["date"] == "2026-10-20"
    assert body["startTime"] == "18:00"
    assert body["endTime"] == "19:30"
    assert Decimal(body["duration"]) == Decimal("1.5")
    assert Decimal(body["totalPrice"]) == Decimal("7750")
    assert body["usedLoyaltyPoints"] is True
    assert body["ground"]["name"] == "Victory Sports Complex"


def test_loyalty_points_are_not_redeemed_by_booking(client, user_headers):
    _book(client, user_headers, useLoyalty=True)

    me = client.get(f"{API}/auth/me", headers=user_headers).json()

    assert me["loyaltyPoints"] == 150


def test_list_my_bookings(client, user_headers, admin_headers):
    _book(client, user_headers)
    _book(client, user_headers, slots=["10:00"])
    _book(client, admin_headers, slots=["11:00"])

    response = client.get(f"{API}/bookings", headers=user_headers)

    assert response.status_code == 200
    bookings = response.json()
    assert len(bookings) == 2
    assert {booking["startTime"] for booking in bookings} == {"18:00", "10:00"}


def test_cancel_booking(client, user_headers):
    booking_id = _book(client, user_headers).json()["id"]

    response = client.post(f"{API}/bookings/{booking_id}/cancel", headers=user_headers)

    assert response.status_code == 200
    assert response.json()["status"] == "cancelled"

    again = client.post(f"{API}/bookings/{booking_id}/cancel", headers=user_headers)
    assert again.status_code == 409

    cancelled = client.get(
        f"{API}/bookings", params={"status": "cancelled"}, headers=user_headers
    ).json()
    assert [booking["id"] for booking in cancelled] == [booking_id]


def test_other_users_booking_is_hidden(client, user_headers, admin_headers):
    booking_id = _book(client, admin_headers).json()["id"]

    assert client.get(f"{API}/bookings/{booking_id}", headers=user_headers).status_code == 404
    assert client.get(f"{API}/bookings/{booking_id}", headers=admin_headers).status_code == 200


def test_loyalty_flag_is_false_when_no_points_are_available(client, admin_headers):
    response = _book(client, admin_headers, useLoyalty=True)

    assert response.status_code == 201
    body = response.json()
    assert body["usedLoyaltyPoints"] is False
    assert Decimal(body["totalPrice"]) == Decimal("7800")


def test_booking_outside_opening_hours_is_rejected(client, user_headers):
    response = _book(client, user_headers, slots=["18:00", "03:00"])

    assert response.status_code == 422
    assert "03:00" in response.json()["detail"]

    bookings = client.get(f"{API}/bookings", headers=user_headers).json()
    assert bookings == []


def test_quote_outside_opening_hours_prices_at_zero(client, user_headers):
    response = client.post(
        f"{API}/bookings/quote",
        json={"groundId": 1, "slots": ["03:00"]},
        headers=user_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert Decimal(body["basePrice"]) == Decimal("0")
    assert Decimal(body["total"]) == Decimal("0")
