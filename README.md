# taskapi

A small HTTP service that keeps a list of tasks. Each task has a description,
an owner and a status, and is given a numeric id when it is created. Tasks are
stored in a local SQLite database file, whose `tasks_table` table is created
on first use.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
taskapi
```

Options:

- `--database PATH` — the SQLite file to use (default `tasks.db`)
- `--host ADDRESS` — the address to listen on (default `0.0.0.0`)
- `--port PORT` — the port to listen on (default `8080`)

The server is Flask's built-in development server.

## The task document

Tasks are exchanged as JSON objects:

```json
{
  "id_taks": 1,
  "description": "Write the report",
  "owner": "alice",
  "status": "pending"
}
```

Note that the id field is spelled `id_taks`. In request bodies every field is
optional; missing or `null` fields default to `0` or the empty string, and
unknown keys are ignored. The id must be an integer in the signed 64-bit range
and the other fields must be strings. The body is read as JSON whatever the
`Content-Type` header says.

## Endpoints

| Method | Path                        | What it does                                   |
|--------|-----------------------------|------------------------------------------------|
| POST   | `/tasks`                    | Create a task; replies `201` with the new id   |
| GET    | `/tasks`                    | List all tasks, ordered by id                  |
| GET    | `/tasks/<id>`               | Fetch one task                                 |
| GET    | `/tasks/owner?owner=<name>` | List the tasks of one owner, ordered by id     |
| PUT    | `/tasks/<id>`               | Replace a task's description, owner and status |
| DELETE | `/tasks/<id>`               | Delete a task                                  |

Replies and errors:

- `POST /tasks` ignores any `id_taks` in the body; the reply body is the new
  id as a bare JSON number.
- `GET /tasks` replies with a JSON array, or `null` when there are no tasks.
- A body that is not a valid task document gives `400` with
  `{"error": "Invalid task data"}`.
- An id in the path that is not a decimal integer in the signed 64-bit range
  gives `400` with `{"error": "Invalid Task ID"}`.
- `GET /tasks/<id>` for an unknown id gives `404` with
  `{"message": "Task not found"}`.
- `GET /tasks/owner` without an `owner` parameter gives `400` with
  `{"error": "Owner is required"}`; an owner with no tasks gives `404` with
  `{"message": "No tasks found for the specified owner"}`.
- `PUT` takes the task's id from the body (`id_taks`, non-zero), not from the
  path; without it the reply is `400` with
  `{"error": "Task ID is required for update"}`. On success the reply is
  `{"message": "Task updated successfully"}`, also when no task has that id.
- `DELETE` replies `{"message": "Task deleted successfully"}`, also when no
  task has that id.
- A storage failure gives `500` with an `error` message.

## Example

```
curl -X POST localhost:8080/tasks \
     -H 'Content-Type: application/json' \
     -d '{"description": "Write the report", "owner": "alice", "status": "pending"}'

curl 'localhost:8080/tasks/owner?owner=alice'

curl -X PUT localhost:8080/tasks/1 \
     -d '{"id_taks": 1, "description": "Write the report", "owner": "alice", "status": "done"}'
```

## Using it from Python

- `taskapi.entity.Task` — the task dataclass, with `to_dict()` and
  `Task.from_dict(data)` for its JSON form.
- `taskapi.db.connect_db(path)` opens a SQLite database and creates the table;
  `taskapi.db.create_schema(connection)` creates the table on an existing
  connection.
- `taskapi.repository.TaskRepository` reads and writes tasks through a
  connection.
- `taskapi.usecase.TaskUsecase` wraps a repository;
  `taskapi.usecase.TaskUsecaseInterface` is the abstract set of operations the
  HTTP layer uses.
- `taskapi.controller.TaskController` holds the request handlers and attaches
  them to a Flask app with `register(app)`.
- `taskapi.app.create_app(usecase)` builds the Flask application around any
  `TaskUsecaseInterface`, which makes it easy to serve a different store or to
  test the HTTP layer on its own.

```python
from taskapi.app import create_app
from taskapi.db import connect_db
from taskapi.repository import TaskRepository
from taskapi.usecase import TaskUsecase

app = create_app(TaskUsecase(TaskRepository(connect_db(":memory:"))))
client = app.test_client()
client.post("/tasks", json={"description": "Write the report", "owner": "alice"})
print(client.get("/tasks").get_json())
```

## What it does not do

There is no authentication, no paging of results and no other storage than
SQLite.