"""
SQLite database integration.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager that commits on
success (``get_cursor``) and the schema bootstrap run on application
start (``init_db``).  Every helper takes the database path explicitly;
there is no module-level connection.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY,
    first_name TEXT,
    last_name TEXT,
    CONSTRAINT unique_name UNIQUE (first_name, last_name)
);
"""


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    An absolute path is used as is.  A relative path is resolved
    against the current working directory.
    """
    if os.path.isabs(database_url):
        return database_url
    return str(Path(database_url).resolve())


def get_connection(db_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Key constraint enforcement is switched on for the lifetime
    of the connection; SQLite has it off by default.
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor(db_path: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed only if the block finishes without an
    exception.
    """
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(db_path: str) -> None:
    """Create the users table if it does not exist yet.

    The parent directory of the database file is created when missing.
    Running this against an existing database is a no-op.
    """
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    with get_cursor(db_path) as cursor:
        cursor.executescript(SCHEMA)
