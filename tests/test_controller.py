import json

import pytest
from flask import Flask

from taskapi.controller import TaskController
from taskapi.entity import Task
from taskapi.usecase import TaskUsecaseInterface


def _unset(*args, **kwargs):
    raise AssertionError("unexpected call")


class FakeUsecase(TaskUsecaseInterface):
    def __init__(self, get_tasks=_unset, add_task=_unset, find_task_by_id=_unset,
                 find_task_by_owner=_unset, update_task=_unset, delete_task=_unset):
        self.get_tasks_fn = get_tasks
        self.add_task_fn = add_task
        self.find_task_by_id_fn = find_task_by_id
        self.find_task_by_owner_fn = find_task_by_owner
        self.update_task_fn = update_task
        self.delete_task_fn = delete_task

    def get_tasks(self):
        return self.get_tasks_fn()

    def add_task(self, task):
        return self.add_task_fn(task)

    def find_task_by_id(self, task_id):
        return self.find_task_by_id_fn(task_id)

    def find_task_by_owner(self, owner):
        return self.find_task_by_owner_fn(owner)

    def update_task(self, task):
        return self.update_task_fn(task)

    def delete_task(self, task_id):
        return self.delete_task_fn(task_id)


def _fail(*args):
    raise RuntimeError("fail")


def client_for(usecase):
    app = Flask("test")
    TaskController(usecase).register(app)
    return app.test_client()


def test_get_tasks_success():
    client = client_for(FakeUsecase(get_tasks=lambda: [Task(id=1, description="Test")]))
    response = client.get("/tasks")
    assert response.status_code == 200
    tasks = response.get_json()
    assert len(tasks) == 1
    assert tasks[0]["id_taks"] == 1


def test_get_tasks_empty_is_null():
    client = client_for(FakeUsecase(get_tasks=lambda: []))
    response = client.get("/tasks")
    assert response.status_code == 200
    assert response.data.strip() == b"null"


def test_get_tasks_error():
    client = client_for(FakeUsecase(get_tasks=_fail))
    response = client.get("/tasks")
    assert response.status_code == 500
    assert response.get_json() == {"error": "Failed to retrieve tasks"}


def test_add_task_success():
    received = []

    def add(task):
        received.append(task)
        return 42

    client = client_for(FakeUsecase(add_task=add))
    body = json.dumps(Task(description="New Task").to_dict())
    response = client.post("/tasks", data=body, content_type="application/json")
    assert response.status_code == 201
    assert response.get_json() == 42
    assert received == [Task(description="New Task")]


def test_add_task_bad_request():
    client = client_for(FakeUsecase())
    response = client.post("/tasks", data="invalid", content_type="application/json")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid task data"}


def test_add_task_wrong_field_type_is_bad_request():
    client = client_for(FakeUsecase())
    response = client.post("/tasks", data='{"owner": 3}', content_type="application/json")
    assert response.status_code == 400


def test_add_task_error():
    client = client_for(FakeUsecase(add_task=_fail))
    body = json.dumps(Task(description="New Task").to_dict())
    response = client.post("/tasks", data=body, content_type="application/json")
    assert response.status_code == 500
    assert response.get_json() == {"error": "Failed to add task"}


def test_find_task_by_id_success():
    client = client_for(
        FakeUsecase(find_task_by_id=lambda task_id: Task(id=task_id, description="Found"))
    )
    response = client.get("/tasks/1")
    assert response.status_code == 200
    assert response.get_json()["id_taks"] == 1


@pytest.mark.parametrize("raw", ["abc", "1.5", "99999999999999999999"])
def test_find_task_by_id_invalid(raw):
    client = client_for(FakeUsecase())
    response = client.get(f"/tasks/{raw}")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid Task ID"}


def test_find_task_by_id_not_found():
    client = client_for(FakeUsecase(find_task_by_id=lambda task_id: None))
    response = client.get("/tasks/5")
    assert response.status_code == 404
    assert response.get_json() == {"message": "Task not found"}


def test_find_task_by_id_error():
    client = client_for(FakeUsecase(find_task_by_id=_fail))
    response = client.get("/tasks/5")
    assert response.status_code == 500


def test_find_by_owner_requires_owner():
    client = client_for(FakeUsecase())
    response = client.get("/tasks/owner")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Owner is required"}


def test_find_by_owner_no_tasks():
    client = client_for(FakeUsecase(find_task_by_owner=lambda owner: []))
    response = client.get("/tasks/owner?owner=ana")
    assert response.status_code == 404
    assert response.get_json() == {"message": "No tasks found for the specified owner"}


def test_find_by_owner_success():
    client = client_for(
        FakeUsecase(find_task_by_owner=lambda owner: [Task(id=2, owner=owner)])
    )
    response = client.get("/tasks/owner?owner=ana")
    assert response.status_code == 200
    assert [t["owner"] for t in response.get_json()] == ["ana"]


def test_update_requires_id():
    client = client_for(FakeUsecase())
    response = client.put("/tasks/1", data='{"description": "x"}')
    assert response.status_code == 400
    assert response.get_json() == {"error": "Task ID is required for update"}


def test_update_success_uses_body_id():
    received = []
    client = client_for(FakeUsecase(update_task=received.append))
    response = client.put("/tasks/9", data='{"id_taks": 3, "status": "done"}')
    assert response.status_code == 200
    assert response.get_json() == {"message": "Task updated successfully"}
    assert received == [Task(id=3, status="done")]


def test_update_error():
    client = client_for(FakeUsecase(update_task=_fail))
    response = client.put("/tasks/3", data='{"id_taks": 3}')
    assert response.status_code == 500


def test_delete_success():
    received = []
    client = client_for(FakeUsecase(delete_task=received.append))
    response = client.delete("/tasks/7")
    assert response.status_code == 200
    assert response.get_json() == {"message": "Task deleted successfully"}
    assert received == [7]


def test_delete_invalid_id():
    client = client_for(FakeUsecase())
    response = client.delete("/tasks/seven")
    assert response.status_code == 400


def test_delete_error():
    client = client_for(FakeUsecase(delete_task=_fail))
    response = client.delete("/tasks/7")
    assert response.status_code == 500
    assert response.get_json() == {"error": "Failed to delete task"}