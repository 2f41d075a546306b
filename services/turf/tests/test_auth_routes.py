from tests.conftest import API


def test_login_returns_token_and_user(client):
    response = client.post(
        f"{API}/auth/login",
        json={"username": "ahmed", "password": "password123"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["tokenType"] == "bearer"
    assert body["accessToken"]
    assert body["user"]["username"] == "ahmed"
    assert body["user"]["loyaltyPoints"] == 150
    assert body["user"]["isAdmin"] is False
    assert "passwordHash" not in body["user"]


def test_login_with_wrong_password(client):
    response = client.post(
        f"{API}/auth/login",
        json={"username": "ahmed", "password": "nope"},
    )

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid credentials"}


def test_me_requires_token(client):
    assert client.get(f"{API}/auth/me").status_code == 401


def test_me_rejects_garbage_token(client):
    response = client.get(
        f"{API}/auth/me",
        headers={"Authorization": "Bearer not-a-jwt"},
    )

    assert response.status_code == 401


def test_me_returns_current_user(client, admin_headers):
    response = client.get(f"{API}/auth/me", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["isAdmin"] is True
