from fastapi.testclient import TestClient

from taskdeck.models import Profile


def _create(client: TestClient, name: str) -> dict:
    response = client.post("/api/profiles", json={"displayName": name})
    assert response.status_code == 201
    return response.json()


def test_create_profile_is_idempotent_by_name(client: TestClient) -> None:
    first = _create(client, "Bob")
    second = _create(client, "Bob")

    assert first["id"] == second["id"]
    assert first["displayName"] == "Bob"
    assert "createdAt" in first
    assert len(client.get("/api/profiles").json()) == 1


def test_display_name_is_trimmed(client: TestClient) -> None:
    first = _create(client, "  Ann ")
    second = _create(client, "Ann")

    assert first["displayName"] == "Ann"
    assert first["id"] == second["id"]


def test_empty_display_name_is_rejected(client: TestClient) -> None:
    response = client.post("/api/profiles", json={"displayName": "   "})

    assert response.status_code == 400
    body = response.json()
    assert body["type"] == "ValidationError"
    assert "displayName" in body["message"]


def test_missing_display_name_is_rejected(client: TestClient) -> None:
    response = client.post("/api/profiles", json={})

    assert response.status_code == 400
    assert response.json()["message"]


def test_list_profiles_in_creation_order(client: TestClient) -> None:
    _create(client, "Ann")
    _create(client, "Bob")

    names = [profile["displayName"] for profile in client.get("/api/profiles").json()]
    assert names == ["Ann", "Bob"]


def test_get_profile_by_name(client: TestClient) -> None:
    created = _create(client, "Cleo")

    assert client.get("/api/profiles/by-name/Cleo").json()["id"] == created["id"]

    response = client.get("/api/profiles/by-name/Nobody")
    assert response.status_code == 404
    assert "Nobody" in response.json()["message"]


def test_non_numeric_profile_id_is_a_validation_error(client: TestClient) -> None:
    assert client.get("/api/profiles/abc/completions").status_code == 400
    assert client.post("/api/profiles/abc/reset").status_code == 400


def test_unknown_profile_is_not_found(client: TestClient) -> None:
    assert client.get("/api/profiles/999/completions").status_code == 404
    assert client.post("/api/profiles/999/reset").status_code == 404


def test_new_profile_timestamp_is_timezone_aware(client: TestClient) -> None:
    assert Profile(display_name="Dee").created_at.tzinfo is not None

    response = client.post("/api/profiles", json={"displayName": "Dee"})
    assert response.status_code == 201
    assert response.json()["createdAt"]
