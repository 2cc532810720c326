import pytest

REGISTER_URL = "/tessa/v1/register"


def test_register_owner(client, identity_provider):
    response = client.post(
        REGISTER_URL,
        json={"name": "Ada Owner", "email": "ada@example.com", "password": "Password1"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "success"
    owner = body["data"]
    assert set(owner) == {"id", "name", "email", "role", "createdAt", "updatedAt"}
    assert owner["role"] == "OWNER"
    assert owner["id"] in identity_provider.identities


def test_register_duplicate_email(client, registered_owner, identity_provider):
    identity_provider.calls.clear()

    response = client.post(
        REGISTER_URL,
        json={"name": "Ada Again", "email": "ada@example.com", "password": "Password1"},
    )

    assert response.status_code == 409
    assert response.json()["message"] == "Owner with this email already exists"
    assert identity_provider.calls == []


def test_register_identity_failure_leaves_nothing_behind(client, identity_provider):
    identity_provider.fail_create = True

    response = client.post(
        REGISTER_URL,
        json={"name": "Ada Owner", "email": "ada@example.com", "password": "Password1"},
    )

    assert response.status_code == 500
    body = response.json()
    assert body["status"] == "error"
    assert body["code"] == 500
    assert body["message"] == "Failed to create owner"
    assert "stack" in body

    identity_provider.fail_create = False
    retry = client.post(
        REGISTER_URL,
        json={"name": "Ada Owner", "email": "ada@example.com", "password": "Password1"},
    )
    assert retry.status_code == 201


@pytest.mark.parametrize("payload", [
    {"name": "A", "email": "ada@example.com", "password": "Password1"},
    {"name": "Ada", "email": "not-an-email", "password": "Password1"},
    {"name": "Ada", "email": "ada@example.com", "password": "Pass1"},
    {"name": "Ada", "email": "ada@example.com", "password": "password1"},
    {"email": "ada@example.com", "password": "Password1"},
])
def test_register_rejects_invalid_input(client, identity_provider, payload):
    response = client.post(REGISTER_URL, json=payload)

    assert response.status_code == 400
    assert response.json()["status"] == "error"
    assert identity_provider.calls == []


def test_register_password_needs_capital_letter(client):
    response = client.post(
        REGISTER_URL,
        json={"name": "Ada", "email": "ada@example.com", "password": "password1"},
    )

    assert "Password must contain at least one capital letter." in response.json()["message"]


def test_registered_owner_never_exposes_password(client):
    response = client.post(
        REGISTER_URL,
        json={"name": "John Doe", "email": "john@example.com", "password": "SecurePass123!"},
    )

    assert response.status_code == 201
    assert response.json()["data"]["role"] == "OWNER"
    assert "password" not in response.json()["data"]
