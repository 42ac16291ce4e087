"""Database engine helpers.

This centralizes engine creation so both the app and tests can share the
same configuration. By default the SQLite database lives in the user's
home under `~/.gazie-tui/gazie.db` (see `gazie.config`).
"""

import os
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from gazie.config import get_settings

from .models import Base


def get_engine(database_url: Optional[str] = None) -> Engine:
    """Return a SQLAlchemy engine, creating the data dir as needed."""
    url = database_url or get_settings().database_url
    if url.startswith("sqlite:///"):
        db_location = url.replace("sqlite:///", "")
        if db_location != ":memory:" and db_location:
            os.makedirs(os.path.dirname(db_location) or ".", exist_ok=True)
    eng = create_engine(url, echo=False, future=True)
    if eng.dialect.name == "sqlite":
        event.listen(eng, "connect", _enable_foreign_keys)
    return eng


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def init_db(eng: Engine) -> None:
    """Create tables if they don't exist.

    No migrations: `create_all` only issues CREATE TABLE for missing tables,
    so repeated launches against the same file are safe.
    """
    Base.metadata.create_all(eng)
