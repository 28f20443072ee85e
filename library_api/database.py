"""
Database Connection Module

This module opens the one engine the application uses to talk to MySQL.

Engine, not Session
===================
The SQLAlchemy Engine wraps a connection pool and is safe to share between
request threads. The catalog checks a connection out of the pool for each
statement, so there is no per-request session to manage and no extra
locking in the application.

Fail-fast Startup
=================
connect() runs a liveness check right after creating the engine. If the
database is unreachable or the credentials are wrong, the error is logged
and DatabaseUnavailableError propagates out of the application lifespan:
uvicorn aborts startup and the process exits. There is no retry loop.
"""

import logging

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError

from library_api.config import Settings
from library_api.services.errors import DatabaseUnavailableError

logger = logging.getLogger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    """
    Create the engine for the configured database.

    Creating an engine does not open a connection; the first one is made
    lazily by the pool.

    Args:
        settings: Application settings (credentials and debug flag)

    Returns:
        SQLAlchemy Engine bound to the library database
    """
    return create_engine(
        settings.database.url,
        pool_pre_ping=True,  # Verify pooled connections are alive before use
        echo=settings.debug,  # Log SQL in debug mode
    )


def check_connection(engine: Engine) -> None:
    """
    Run a trivial query to prove the database answers.

    Raises:
        SQLAlchemyError: If no connection can be made or the query fails
    """
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def connect(settings: Settings) -> Engine:
    """
    Open the database and verify it is reachable.

    Args:
        settings: Application settings

    Returns:
        A live Engine

    Raises:
        DatabaseUnavailableError: If the engine cannot be created or the
            liveness check fails
    """
    database = settings.database
    try:
        engine = create_db_engine(settings)
        check_connection(engine)
    except SQLAlchemyError as exc:
        logger.critical(
            f"Cannot connect to database {database.name!r} "
            f"at {database.host}:{database.port}: {exc}"
        )
        raise DatabaseUnavailableError("connect", str(exc)) from exc

    return engine
