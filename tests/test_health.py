"""Smoke tests for the app-level endpoints in studio/main.py."""


def test_root(client):
    assert client.get("/").json() == {"message": "Studio Booking Desk API is running"}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_validation_errors_are_422_with_detail(client):
    response = client.post("/api/clients", json={"name": "No email"})
    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"] == ["body", "email"]
