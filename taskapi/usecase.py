"""Application operations on tasks."""

from __future__ import annotations

from abc import ABC, abstractmethod

from taskapi.entity import Task
from taskapi.repository import TaskRepository


class TaskUsecaseInterface(ABC):
    """The operations the HTTP layer needs from the task service."""

    @abstractmethod
    def get_tasks(self) -> list[Task]:
        """Return every task."""

    @abstractmethod
    def add_task(self, task: Task) -> int:
        """Store a new task and return its id."""

    @abstractmethod
    def find_task_by_id(self, task_id: int) -> Task | None:
        """Return one task, or None if it does not exist."""

    @abstractmethod
    def find_task_by_owner(self, owner: str) -> list[Task]:
        """Return the tasks of one owner."""

    @abstractmethod
    def update_task(self, task: Task) -> None:
        """Overwrite a stored task."""

    @abstractmethod
    def delete_task(self, task_id: int) -> None:
        """Remove a task."""


class TaskUsecase(TaskUsecaseInterface):
    """Task service backed by a repository."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def get_tasks(self) -> list[Task]:
        return self._repository.get_tasks()

    def add_task(self, task: Task) -> int:
        return self._repository.add_task(task)

    def find_task_by_id(self, task_id: int) -> Task | None:
        return self._repository.find_task_by_id(task_id)

    def find_task_by_owner(self, owner: str) -> list[Task]:
        return self._repository.find_tasks_by_owner(owner)

    def update_task(self, task: Task) -> None:
        self._repository.update_task(task)

    def delete_task(self, task_id: int) -> None:
        self._repository.delete_task(task_id)