[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskapi"
version = "0.1.0"
description = "A small HTTP JSON API for creating, listing, updating and deleting tasks, stored in SQLite."
requires-python = ">=3.10"
keywords = ["tasks", "todo", "rest", "api", "flask", "http", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taskapi = "taskapi.app:main"

[tool.hatch.build.targets.wheel]
packages = ["taskapi"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
