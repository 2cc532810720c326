import base64

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from core.config import Settings
from core.database import build_session_factory, init_db
from main import create_app
from orchestrators.account_orchestrator import AccountOrchestrator
from repositories.owner_repository import OwnerRepository
from repositories.user_repository import UserRepository
from services.owner_service import OwnerService
from services.user_service import UserService

from tests.fakes import FakeIdentityProvider

API_USERNAME = "tessa"
API_PASSWORD = "s3cret"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        environment="test",
        database_url="sqlite://",
        auth_api_username=API_USERNAME,
        auth_api_password=API_PASSWORD,
    )


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = build_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def identity_provider():
    return FakeIdentityProvider()


@pytest.fixture
def owner_service(db):
    return OwnerService(OwnerRepository(db))


@pytest.fixture
def user_service(db):
    return UserService(UserRepository(db))


@pytest.fixture
def orchestrator(owner_service, user_service, identity_provider):
    return AccountOrchestrator(owner_service, user_service, identity_provider)


@pytest.fixture
def basic_auth_header():
    token = base64.b64encode(f"{API_USERNAME}:{API_PASSWORD}".encode()).decode()
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def client(settings, engine, identity_provider, basic_auth_header):
    app = create_app(settings=settings, identity_provider=identity_provider, engine=engine)
    with TestClient(app) as client:
        client.headers.update(basic_auth_header)
        yield client


@pytest.fixture
def registered_owner(client):
    response = client.post(
        "/tessa/v1/register",
        json={"name": "Ada Owner", "email": "ada@example.com", "password": "Password1"},
    )
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def owner_headers(registered_owner, identity_provider):
    return {"userauthorization": identity_provider.issue_token(registered_owner["id"])}
