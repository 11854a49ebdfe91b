"""Storage of tasks in the tasks table."""

from __future__ import annotations

import sqlite3
import threading

from taskapi.entity import Task

_COLUMNS = "id, description, owner, status"


class TaskRepository:
    """Reads and writes tasks through a database connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._lock = threading.Lock()

    def get_tasks(self) -> list[Task]:
        """Return every task ordered by id."""
        with self._lock:
            rows = self._connection.execute(
                f"SELECT {_COLUMNS} FROM tasks_table ORDER BY id"
            ).fetchall()
        return [Task(*row) for row in rows]

    def add_task(self, task: Task) -> int:
        """Insert a task and return the id the database assigned to it."""
        with self._lock, self._connection:
            cursor = self._connection.execute(
                "INSERT INTO tasks_table (description, owner, status) VALUES (?, ?, ?)",
                (task.description, task.owner, task.status),
            )
        return cursor.lastrowid

    def find_task_by_id(self, task_id: int) -> Task | None:
        """Return the task with ``task_id``, or None when there is none."""
        with self._lock:
            row = self._connection.execute(
                f"SELECT {_COLUMNS} FROM tasks_table WHERE id = ?", (task_id,)
            ).fetchone()
        return Task(*row) if row is not None else None

    def find_tasks_by_owner(self, owner: str) -> list[Task]:
        """Return the tasks that belong to ``owner``."""
        with self._lock:
            rows = self._connection.execute(
                f"SELECT {_COLUMNS} FROM tasks_table WHERE owner = ? ORDER BY id",
                (owner,),
            ).fetchall()
        return [Task(*row) for row in rows]

    def update_task(self, task: Task) -> None:
        """Overwrite the stored fields of the task with ``task.id``."""
        with self._lock, self._connection:
            self._connection.execute(
                "UPDATE tasks_table SET description = ?, owner = ?, status = ? WHERE id = ?",
                (task.description, task.owner, task.status, task.id),
            )

    def delete_task(self, task_id: int) -> None:
        """Remove the task with ``task_id``."""
        with self._lock, self._connection:
            self._connection.execute("DELETE FROM tasks_table WHERE id = ?", (task_id,))