"""
Database Session Management
============================

Handles engine creation and session lifecycle.

Network databases get a NullPool engine: every session checks out a fresh
connection and closes it on release, so no connection outlives the
operation that opened it.
"""

import os
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import Engine, create_engine, event, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import NullPool, StaticPool

from rental.config import Settings, settings as default_settings


def create_db_engine(config: Optional[Settings] = None) -> Engine:
    """Create and configure the database engine. Does not connect."""
    config = config or default_settings
    database_url = config.sqlalchemy_database_url

    url = make_url(database_url)

    # SQLite-specific configuration
    if url.get_backend_name() == "sqlite":
        in_memory = url.database in (None, "", ":memory:")

        # Ensure data directory exists
        if not in_memory:
            db_dir = os.path.dirname(url.database)
            if db_dir and not os.path.exists(db_dir):
                os.makedirs(db_dir, exist_ok=True)

        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            # In-memory databases vanish with their connection
            poolclass=StaticPool if in_memory else NullPool,
            echo=config.app_debug,
            hide_parameters=True,
        )

        # Enable foreign keys for SQLite
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    else:
        engine = create_engine(
            database_url,
            poolclass=NullPool,
            echo=config.app_debug,
            hide_parameters=True,
        )

    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to engine."""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


@contextmanager
def session_scope(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Context manager for database sessions.

    Commits on success, rolls back on error and always closes, which
    returns the connection.

    Usage:
        with session_scope(SessionFactory) as db:
            db.execute(...)
    """
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def create_all_tables(engine: Engine) -> None:
    """Create all tables in the database."""
    from rental.models.base import Base

    Base.metadata.create_all(bind=engine)


def drop_all_tables(engine: Engine) -> None:
    """Drop all tables in the database."""
    from rental.models.base import Base

    Base.metadata.drop_all(bind=engine)
