import pytest
from sqlalchemy.exc import OperationalError

import core.database as database
from core.database import build_engine, get_database_health
from core.exceptions import DatabaseException


def test_build_engine_for_sqlite(settings):
    engine = build_engine(settings)

    assert engine.url.get_backend_name() == "sqlite"
    engine.dispose()


def test_build_engine_gives_up_after_retries(settings, monkeypatch):
    def refuse(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    slept = []
    monkeypatch.setattr(database, "create_engine", refuse)

    with pytest.raises(DatabaseException):
        build_engine(settings, retry_delays=(1, 2, 3), sleep=slept.append)

    assert slept == [1, 2]


def test_health_of_working_database(engine):
    assert get_database_health(engine) == {"status": "healthy", "backend": "sqlite"}


def test_health_without_engine():
    assert get_database_health(None)["status"] == "unhealthy"
