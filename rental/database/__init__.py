"""Database package."""

from rental.database.session import (
    create_db_engine,
    create_session_factory,
    session_scope,
    create_all_tables,
    drop_all_tables,
)

__all__ = [
    "create_db_engine",
    "create_session_factory",
    "session_scope",
    "create_all_tables",
    "drop_all_tables",
]
