"""Core model for taskforge.

This module defines the single data structure for task management:
- Task: A dataclass representing a to-do item and its JSON representation
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict


@dataclass
class Task:
    """Task model representing a single to-do item.

    Attributes:
        id: Position-based identifier, 1..N within the current list
        description: Task text, already trimmed
        done: Whether the task has been completed
        created_at: Timestamp when the task was created
    """

    id: int
    description: str
    done: bool = False
    created_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the task to its stored JSON form."""
        return {
            "id": self.id,
            "description": self.description,
            "done": self.done,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """Build a Task from its stored JSON form.

        Raises:
            KeyError: If a field is missing
            TypeError: If the record or a field has the wrong type
            ValueError: If the id is below 1, the description is blank or
                the timestamp is not ISO-8601
        """
        task_id = data["id"]
        description = data["description"]
        done = data.get("done", False)
        created_at = data["createdAt"]

        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise TypeError(f"Task id must be an integer, got {task_id!r}")
        if not isinstance(description, str):
            raise TypeError(f"Task description must be a string, got {description!r}")
        if not isinstance(done, bool):
            raise TypeError(f"Task done flag must be a boolean, got {done!r}")
        if not isinstance(created_at, str):
            raise TypeError(f"Task createdAt must be a string, got {created_at!r}")
        if task_id < 1:
            raise ValueError(f"Task id must be 1 or greater, got {task_id}")
        if not description.strip():
            raise ValueError("Task description cannot be empty")

        return cls(
            id=task_id,
            description=description,
            done=done,
            created_at=parse_timestamp(created_at),
        )


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, including the UTC "Z" suffix.

    datetime.fromisoformat only accepts "Z" from Python 3.11 on.
    """
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)
