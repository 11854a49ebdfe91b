"""The task record and its JSON shape."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

ID_KEY = "id_taks"
_TEXT_FIELDS = ("description", "owner", "status")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass
class Task:
    """A single task as stored and exchanged over the API."""

    id: int = 0
    description: str = ""
    owner: str = ""
    status: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form of the task."""
        return {
            ID_KEY: self.id,
            "description": self.description,
            "owner": self.owner,
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Task:
        """Build a task from a decoded JSON object.

        Missing or null fields keep their defaults; unknown keys are ignored.
        Raises TypeError or ValueError when a field has the wrong type or range.
        """
        if not isinstance(data, Mapping):
            raise TypeError("task data must be a JSON object")

        values: dict[str, Any] = {}
        raw_id = data.get(ID_KEY)
        if raw_id is not None:
            if isinstance(raw_id, bool) or not isinstance(raw_id, int):
                raise TypeError(f"{ID_KEY} must be an integer")
            if not _INT64_MIN <= raw_id <= _INT64_MAX:
                raise ValueError(f"{ID_KEY} is out of range")
            values["id"] = raw_id

        for name in _TEXT_FIELDS:
            value = data.get(name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise TypeError(f"{name} must be a string")
            values[name] = value

        return cls(**values)