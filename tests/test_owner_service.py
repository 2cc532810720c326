import pytest

from core.exceptions import DuplicateException, NotFoundException


def owner_record(**overrides):
    record = {"id": "0b7c1c1e-8f5c-4a8e-9b53-4a1f7a1c0001", "name": "Ada", "email": "ada@example.com"}
    record.update(overrides)
    return record


def test_create_forces_owner_role_and_drops_password(owner_service):
    owner = owner_service.create(owner_record(role="MANAGER", password="Secret123"))

    assert owner.role == "OWNER"
    assert not hasattr(owner, "password")
    assert owner.created_at is not None
    assert owner.updated_at is not None


def test_create_rejects_duplicate_email(owner_service):
    owner_service.create(owner_record())

    with pytest.raises(DuplicateException) as exc_info:
        owner_service.create(owner_record(id="0b7c1c1e-8f5c-4a8e-9b53-4a1f7a1c0002"))

    assert exc_info.value.message == "Owner with this email already exists"


def test_get_by_id_unknown_owner(owner_service):
    with pytest.raises(NotFoundException) as exc_info:
        owner_service.get_by_id("missing")

    assert exc_info.value.message == "Owner not found"


def test_delete_removes_owner(owner_service):
    owner_service.create(owner_record())

    owner_service.delete(owner_record()["id"])

    with pytest.raises(NotFoundException):
        owner_service.get_by_id(owner_record()["id"])


def test_delete_unknown_owner(owner_service):
    with pytest.raises(NotFoundException):
        owner_service.delete("missing")


def test_snapshot_recreates_the_same_owner(owner_service, db):
    owner = owner_service.create(owner_record())
    snapshot = owner_service.snapshot(owner)
    owner_service.delete(owner.id)

    owner_service.create(snapshot)
    db.expire_all()
    restored = owner_service.get_by_id(owner.id)

    assert restored.email == snapshot["email"]
    assert restored.name == snapshot["name"]
    assert restored.created_at.replace(tzinfo=None) == snapshot["created_at"].replace(tzinfo=None)


def test_calls_are_counted(owner_service):
    owner_service.create(owner_record())
    with pytest.raises(NotFoundException):
        owner_service.get_by_id("missing")

    metrics = owner_service.get_metrics()
    assert metrics["total_calls"] == 2
    assert metrics["total_errors"] == 1
    assert metrics["operations"]["get_by_id"]["errors"] == 1
