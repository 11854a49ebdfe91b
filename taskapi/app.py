"""The web application and its command-line entry point."""

from __future__ import annotations

import argparse

from flask import Flask

from taskapi.controller import TaskController
from taskapi.db import DEFAULT_DB_PATH, connect_db
from taskapi.repository import TaskRepository
from taskapi.usecase import TaskUsecase, TaskUsecaseInterface


def create_app(usecase: TaskUsecaseInterface) -> Flask:
    """Build a Flask application serving the task routes."""
    app = Flask(__name__)
    app.json.sort_keys = False
    TaskController(usecase).register(app)
    return app


def main(argv: list[str] | None = None) -> int:
    """Open the database and serve the task API."""
    parser = argparse.ArgumentParser(description="Serve the task API.")
    parser.add_argument("--database", default=DEFAULT_DB_PATH, help="database file")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    args = parser.parse_args(argv)

    connection = connect_db(args.database)
    try:
        app = create_app(TaskUsecase(TaskRepository(connection)))
        app.run(host=args.host, port=args.port)
    finally:
        connection.close()
    return 0