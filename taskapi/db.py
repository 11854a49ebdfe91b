"""Opening the task database."""

from __future__ import annotations

import sqlite3

DEFAULT_DB_PATH = "tasks.db"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS tasks_table (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    description TEXT NOT NULL DEFAULT '',
    owner TEXT NOT NULL DEFAULT '',
    status TEXT NOT NULL DEFAULT ''
)
"""


def create_schema(connection: sqlite3.Connection) -> None:
    """Create the tasks table if it does not exist yet."""
    with connection:
        connection.execute(_SCHEMA)


def connect_db(path: str = DEFAULT_DB_PATH) -> sqlite3.Connection:
    """Open the database at ``path`` and make sure the schema is in place."""
    connection = sqlite3.connect(path, check_same_thread=False)
    try:
        connection.execute("SELECT 1").fetchone()
        create_schema(connection)
    except sqlite3.Error:
        connection.close()
        raise
    return connection