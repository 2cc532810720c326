"""
Database connection and session management.

This module handles:
- Database engine creation with connection pooling
- Session factory setup
- Connection health checks
- Retry logic for database initialization

Nothing is created at import time; main.create_app builds the engine and
session factory once at startup and keeps them on app.state.
"""

import time
from typing import Dict, Any, Optional, Sequence
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import QueuePool
import logging

from core.config import Settings
from core.exceptions import DatabaseException

logger = logging.getLogger('CORE_DATABASE')

# Seconds to wait between connection attempts
RETRY_DELAYS = (1, 2, 3, 5, 8)


def _engine_config(settings: Settings, database_url: str) -> Dict[str, Any]:
    if make_url(database_url).get_backend_name() == "sqlite":
        return {
            'connect_args': {'check_same_thread': False},
            'echo': settings.db_echo,
        }

    return {
        'poolclass': QueuePool,
        'pool_size': settings.db_pool_size,
        'max_overflow': settings.db_max_overflow,
        'pool_timeout': settings.db_pool_timeout,
        'pool_recycle': settings.db_pool_recycle,
        'pool_pre_ping': settings.db_pool_pre_ping,
        'echo': settings.db_echo,
    }


def build_engine(
    settings: Settings,
    retry_delays: Sequence[int] = RETRY_DELAYS,
    sleep=time.sleep,
) -> Engine:
    """
    Create the database engine, retrying while the database is not reachable.

    Args:
        settings: Application settings
        retry_delays: Seconds to wait after each failed attempt
        sleep: Sleep function (injectable for tests)

    Returns:
        Engine: Connected SQLAlchemy engine

    Raises:
        DatabaseException: If no connection could be made after all attempts
    """
    database_url = settings.get_database_url()
    safe_url = make_url(database_url).render_as_string(hide_password=True)
    logger.info(f"Initializing database connection to: {safe_url}")

    attempts = len(retry_delays)
    for i, delay in enumerate(retry_delays):
        try:
            engine = create_engine(database_url, **_engine_config(settings, database_url))
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info(f"Database connection established successfully on attempt {i+1}")
            return engine
        except OperationalError as e:
            logger.error(f"Database not ready (attempt {i+1}/{attempts}): {e}")
            if i < attempts - 1:
                logger.info(f"Retrying in {delay} seconds...")
                sleep(delay)
            else:
                raise DatabaseException(
                    f"Could not connect to the database after {attempts} attempts"
                ) from e

    raise DatabaseException("No connection attempts configured")


def build_session_factory(engine: Engine) -> sessionmaker:
    """Create the session factory bound to the given engine."""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def get_database_health(engine: Optional[Engine]) -> Dict[str, Any]:
    """
    Check database connection health and return status.

    Returns:
        dict: Health status with the backend name

    Example:
        {
            "status": "healthy",
            "backend": "postgresql"
        }
    """
    if engine is None:
        return {"status": "unhealthy", "error": "Database engine not initialized"}

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1")).fetchone()
        return {
            "status": "healthy",
            "backend": engine.url.get_backend_name(),
        }
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return {
            "status": "unhealthy",
            "error": str(e),
            "backend": engine.url.get_backend_name(),
        }


def init_db(engine: Engine) -> None:
    """
    Create the account tables if they don't exist.

    Safe to call on every startup.
    """
    from models import Base

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Account store tables ensured")
    except Exception as e:
        logger.error(f"Error during database initialization: {e}")
        raise
