import pytest

from core.exceptions import DuplicateException
from repositories.owner_repository import OwnerRepository
from repositories.user_repository import UserRepository

OWNER_ID = "0b7c1c1e-8f5c-4a8e-9b53-4a1f7a1c0001"


@pytest.fixture
def owners(db):
    return OwnerRepository(db)


@pytest.fixture
def users(db):
    return UserRepository(db)


def test_exists_and_count(owners):
    assert not owners.exists(OWNER_ID)

    owners.create_owner({"id": OWNER_ID, "name": "Ada", "email": "ada@example.com"})

    assert owners.exists(OWNER_ID)
    assert owners.count() == 1
    assert owners.count({"email": "nobody@example.com"}) == 0


def test_get_by_email(owners):
    owners.create_owner({"id": OWNER_ID, "name": "Ada", "email": "ada@example.com"})

    assert owners.get_by_email("ada@example.com").id == OWNER_ID
    assert owners.get_by_email("nobody@example.com") is None


def test_duplicate_email_is_scoped_to_the_model(owners, users):
    owners.create_owner({"id": OWNER_ID, "name": "Ada", "email": "ada@example.com"})

    user = users.create_user({
        "id": "5f0e2d4c-0000-4000-8000-000000000001",
        "owner_id": OWNER_ID,
        "name": "Ada Employee",
        "email": "ada@example.com",
    })

    assert user.email == "ada@example.com"
    with pytest.raises(DuplicateException):
        owners.create_owner({"id": "0b7c1c1e-8f5c-4a8e-9b53-4a1f7a1c0002", "name": "Ada", "email": "ada@example.com"})


def test_update_by_id_of_missing_record(users):
    assert users.update_by_id("missing", {"name": "Nobody"}) is None


def test_get_by_filter_descending(owners):
    owners.create_owner({"id": OWNER_ID, "name": "Ada", "email": "ada@example.com"})
    owners.create_owner({"id": "0b7c1c1e-8f5c-4a8e-9b53-4a1f7a1c0002", "name": "Grace", "email": "grace@example.com"})

    names = [owner.name for owner in owners.get_by_filter({}, order_by=("name",), order_desc=True)]

    assert names == ["Grace", "Ada"]
