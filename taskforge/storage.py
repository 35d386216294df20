"""Storage layer for taskforge.

This module provides an abstract storage interface and a JSON file
implementation. The file is rewritten in full on every save, through a
temporary file that replaces the target in one step.
"""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from taskforge.models import Task

logger = logging.getLogger(__name__)

DATA_DIR_NAME = ".taskforge"
DATA_FILE_NAME = "tasks.json"


def default_data_file() -> Path:
    """Return the per-user data file, ~/.taskforge/tasks.json."""
    return Path.home() / DATA_DIR_NAME / DATA_FILE_NAME


class Storage(ABC):
    """Abstract base class for task storage implementations."""

    @abstractmethod
    def save(self, tasks: List[Task]) -> None:
        """Save tasks to storage.

        Args:
            tasks: Ordered list of Task objects
        """
        pass

    @abstractmethod
    def load(self) -> List[Task]:
        """Load tasks from storage.

        Returns:
            Ordered list of Task objects
        """
        pass


class JsonStorage(Storage):
    """JSON file-based storage implementation.

    Attributes:
        file_path: Path to the JSON storage file
    """

    def __init__(self, file_path: Optional[str] = None):
        """Initialize JsonStorage with a file path.

        Args:
            file_path: Path to the JSON file for storage. If None, uses
                      ~/.taskforge/tasks.json
        """
        self.file_path = Path(file_path) if file_path is not None else default_data_file()

    def save(self, tasks: List[Task]) -> None:
        """Atomically overwrite the JSON file with the full task list.

        Args:
            tasks: Ordered list of Task objects

        Raises:
            OSError: If the directory or file cannot be written
        """
        self.file_path.parent.mkdir(parents=True, exist_ok=True)

        payload = [task.to_dict() for task in tasks]

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.file_path.name}.", suffix=".tmp", dir=str(self.file_path.parent)
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
                f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug("Saved %d task(s) to %s", len(tasks), self.file_path)

    def load(self) -> List[Task]:
        """Load tasks from the JSON file.

        Returns:
            List of Task objects in stored order. Returns an empty list if
            the file doesn't exist, is empty, unreadable or malformed.
        """
        try:
            if not self.file_path.exists():
                logger.debug("No task file at %s, starting empty", self.file_path)
                return []
            content = self.file_path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s (%s), starting with no tasks", self.file_path, e)
            return []

        if not content:
            return []

        try:
            data = json.loads(content)
            if not isinstance(data, list):
                raise TypeError(f"expected a JSON array, got {type(data).__name__}")
            tasks = [Task.from_dict(item) for item in data]
            ids = [task.id for task in tasks]
            if len(set(ids)) != len(ids):
                raise ValueError("duplicate task ids")
        except (KeyError, TypeError, ValueError, RecursionError) as e:
            logger.warning("Ignoring malformed task file %s (%s)", self.file_path, e)
            return []

        logger.debug("Loaded %d task(s) from %s", len(tasks), self.file_path)
        return tasks
