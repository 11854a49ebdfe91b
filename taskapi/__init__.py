"""A small HTTP JSON API for managing tasks stored in SQLite."""

__version__ = "0.1.0"