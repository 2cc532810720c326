import pytest

from core.exceptions import DatabaseException
from services.user_service import UserService

USER_URL = "/tessa/v1/user"
MISSING_ID = "5f0e2d4c-0000-4000-8000-000000000099"


@pytest.fixture
def user_payload(registered_owner):
    return {
        "name": "Bob Employee",
        "email": "bob@example.com",
        "password": "Secret1",
        "ownerId": registered_owner["id"],
        "role": "EMPLOYEE",
    }


@pytest.fixture
def created_user(client, owner_headers, user_payload):
    response = client.post(USER_URL, json=user_payload, headers=owner_headers)
    assert response.status_code == 201
    return response.json()["data"]


def identity_calls(identity_provider, name):
    return [call for call in identity_provider.calls if call[0] == name]


def test_create_user(client, created_user, registered_owner, identity_provider):
    assert set(created_user) == {"id", "ownerId", "name", "email", "role", "createdAt", "updatedAt"}
    assert created_user["ownerId"] == registered_owner["id"]
    assert created_user["role"] == "EMPLOYEE"
    assert created_user["id"] in identity_provider.identities


def test_create_user_with_malformed_owner_id(client, owner_headers, user_payload, identity_provider):
    identity_provider.calls.clear()

    response = client.post(USER_URL, json={**user_payload, "ownerId": "invalid-id"}, headers=owner_headers)

    assert response.status_code == 400
    assert identity_provider.calls == []


def test_create_user_for_unknown_owner(client, owner_headers, user_payload):
    response = client.post(
        USER_URL,
        json={**user_payload, "ownerId": "0b7c1c1e-8f5c-4a8e-9b53-4a1f7a1c0099"},
        headers=owner_headers,
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Owner not found"


def test_create_user_with_duplicate_email(client, owner_headers, user_payload, identity_provider):
    identity_provider.calls.clear()

    first = client.post(USER_URL, json=user_payload, headers=owner_headers)
    second = client.post(USER_URL, json=user_payload, headers=owner_headers)

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json()["message"] == "User with this email already exists"
    assert len(identity_calls(identity_provider, "create_identity")) == 1


@pytest.mark.parametrize("changes", [
    {"role": "OWNER"},
    {"password": "secret1"},
    {"password": "Sec1"},
    {"name": "B"},
])
def test_create_user_rejects_invalid_input(client, owner_headers, user_payload, changes):
    response = client.post(USER_URL, json={**user_payload, **changes}, headers=owner_headers)

    assert response.status_code == 400


def test_create_user_identity_failure(client, owner_headers, user_payload, identity_provider):
    identity_provider.fail_create = True

    response = client.post(USER_URL, json=user_payload, headers=owner_headers)

    assert response.status_code == 500
    assert response.json()["message"] == "Failed to create user"
    assert client.get(USER_URL, headers=owner_headers).json()["data"] == []


def test_list_users_of_calling_owner(client, owner_headers, created_user, identity_provider):
    other_owner = client.post(
        "/tessa/v1/register",
        json={"name": "Grace Owner", "email": "grace@example.com", "password": "Password1"},
    ).json()["data"]
    other_headers = {"userauthorization": identity_provider.issue_token(other_owner["id"])}

    assert client.get(USER_URL, headers=owner_headers).json()["data"] == [created_user]
    assert client.get(USER_URL, headers=other_headers).json()["data"] == []


def test_get_user(client, owner_headers, created_user):
    response = client.get(f"{USER_URL}/{created_user['id']}", headers=owner_headers)

    assert response.status_code == 200
    assert response.json()["data"] == created_user


def test_get_unknown_user(client, owner_headers):
    response = client.get(f"{USER_URL}/{MISSING_ID}", headers=owner_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


def test_update_role_back_and_forth(client, owner_headers, created_user):
    role_url = f"{USER_URL}/{created_user['id']}/role"

    promoted = client.patch(role_url, json={"role": "MANAGER"}, headers=owner_headers)
    demoted = client.patch(role_url, json={"role": "EMPLOYEE"}, headers=owner_headers)

    assert promoted.status_code == 200
    assert promoted.json()["data"]["role"] == "MANAGER"
    assert demoted.status_code == 200
    stored = client.get(f"{USER_URL}/{created_user['id']}", headers=owner_headers).json()["data"]
    assert stored["role"] == "EMPLOYEE"


def test_update_role_rejects_unknown_role(client, owner_headers, created_user):
    response = client.patch(
        f"{USER_URL}/{created_user['id']}/role", json={"role": "ADMIN"}, headers=owner_headers
    )

    assert response.status_code == 400


def test_update_role_of_unknown_user(client, owner_headers):
    response = client.patch(f"{USER_URL}/{MISSING_ID}/role", json={"role": "MANAGER"}, headers=owner_headers)

    assert response.status_code == 404


def test_delete_user(client, owner_headers, created_user, identity_provider):
    response = client.delete(f"{USER_URL}/{created_user['id']}", headers=owner_headers)

    assert response.status_code == 204
    assert created_user["id"] not in identity_provider.identities
    assert client.get(f"{USER_URL}/{created_user['id']}", headers=owner_headers).status_code == 404


def test_delete_unknown_user(client, owner_headers, identity_provider):
    response = client.delete(f"{USER_URL}/{MISSING_ID}", headers=owner_headers)

    assert response.status_code == 404
    assert identity_calls(identity_provider, "delete_identity") == []


def test_delete_user_identity_failure_restores_user(client, owner_headers, created_user, identity_provider):
    identity_provider.fail_delete = True

    response = client.delete(f"{USER_URL}/{created_user['id']}", headers=owner_headers)

    assert response.status_code == 500
    assert response.json()["message"] == "Failed to delete user"
    assert client.get(f"{USER_URL}/{created_user['id']}", headers=owner_headers).json()["data"] == created_user


def test_failed_restore_reports_data_inconsistency(client, owner_headers, created_user, identity_provider, monkeypatch):
    def refuse(self, record):
        raise DatabaseException("Failed to create User")

    identity_provider.fail_delete = True
    monkeypatch.setattr(UserService, "create", refuse)

    response = client.delete(f"{USER_URL}/{created_user['id']}", headers=owner_headers)

    assert response.status_code == 500
    assert response.json()["message"] == (
        "Failed to delete user and rollback failed. Data inconsistency detected."
    )
