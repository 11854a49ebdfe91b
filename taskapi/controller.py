"""HTTP handlers for the task endpoints."""

from __future__ import annotations

import json
import re
from typing import Any

from flask import Flask, Response, jsonify, request

from taskapi.entity import Task
from taskapi.usecase import TaskUsecaseInterface

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _respond(status: int, payload: Any) -> tuple[Response, int]:
    return jsonify(payload), status


def _parse_id(text: str) -> int:
    if not _ID_PATTERN.fullmatch(text):
        raise ValueError(f"invalid id: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"id out of range: {text!r}")
    return value


def _read_task() -> Task:
    payload = json.loads(request.get_data())
    return Task() if payload is None else Task.from_dict(payload)


def _task_list(tasks: list[Task]) -> list[dict[str, Any]] | None:
    # An empty result is sent as JSON null.
    return [task.to_dict() for task in tasks] if tasks else None


class TaskController:
    """Maps HTTP requests onto a task service."""

    def __init__(self, usecase: TaskUsecaseInterface) -> None:
        self._usecase = usecase

    def get_tasks(self):
        try:
            tasks = self._usecase.get_tasks()
        except Exception:
            return _respond(500, {"error": "Failed to retrieve tasks"})
        return _respond(200, _task_list(tasks))

    def add_task(self):
        try:
            task = _read_task()
        except (ValueError, TypeError):
            return _respond(400, {"error": "Invalid task data"})
        try:
            new_id = self._usecase.add_task(task)
        except Exception:
            return _respond(500, {"error": "Failed to add task"})
        return _respond(201, new_id)

    def find_tasks_by_owner(self):
        owner = request.args.get("owner", "")
        if not owner:
            return _respond(400, {"error": "Owner is required"})
        try:
            tasks = self._usecase.find_task_by_owner(owner)
        except Exception:
            return _respond(500, {"error": "Failed to find tasks by owner"})
        if not tasks:
            return _respond(404, {"message": "No tasks found for the specified owner"})
        return _respond(200, _task_list(tasks))

    def find_task_by_id(self, task_id: str):
        if not task_id:
            return _respond(400, {"error": "Task ID is required"})
        try:
            parsed = _parse_id(task_id)
        except ValueError:
            return _respond(400, {"error": "Invalid Task ID"})
        try:
            task = self._usecase.find_task_by_id(parsed)
        except Exception:
            return _respond(500, {"error": "Failed to find task"})
        if task is None:
            return _respond(404, {"message": "Task not found"})
        return _respond(200, task.to_dict())

    def update_task(self, task_id: str | None = None):
        """Update the task whose id is given in the request body.

        The id in the path is not consulted.
        """
        try:
            task = _read_task()
        except (ValueError, TypeError):
            return _respond(400, {"error": "Invalid task data"})
        if task.id == 0:
            return _respond(400, {"error": "Task ID is required for update"})
        try:
            self._usecase.update_task(task)
        except Exception:
            return _respond(500, {"error": "Failed to update task"})
        return _respond(200, {"message": "Task updated successfully"})

    def delete_task(self, task_id: str):
        if not task_id:
            return _respond(400, {"error": "Task ID is required"})
        try:
            parsed = _parse_id(task_id)
        except ValueError:
            return _respond(400, {"error": "Invalid Task ID"})
        try:
            self._usecase.delete_task(parsed)
        except Exception:
            return _respond(500, {"error": "Failed to delete task"})
        return _respond(200, {"message": "Task deleted successfully"})

    def register(self, app: Flask) -> None:
        """Attach the task routes to ``app``."""
        app.add_url_rule("/tasks", "add_task", self.add_task, methods=["POST"])
        app.add_url_rule("/tasks", "get_tasks", self.get_tasks, methods=["GET"])
        app.add_url_rule(
            "/tasks/owner", "find_tasks_by_owner", self.find_tasks_by_owner, methods=["GET"]
        )
        app.add_url_rule(
            "/tasks/<task_id>", "find_task_by_id", self.find_task_by_id, methods=["GET"]
        )
        app.add_url_rule(
            "/tasks/<task_id>", "update_task", self.update_task, methods=["PUT"]
        )
        app.add_url_rule(
            "/tasks/<task_id>", "delete_task", self.delete_task, methods=["DELETE"]
        )