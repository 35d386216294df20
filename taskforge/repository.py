"""Task repository for managing task operations.

This module provides a TaskRepository class that owns the in-memory task
list for one process invocation. The list is loaded once when the repository
is created and written back through the storage layer after every change.
"""

from typing import List, Optional

from taskforge.models import Task
from taskforge.storage import JsonStorage, Storage


def next_id(tasks: List[Task]) -> int:
    """Return one more than the highest id in use, or 1 for an empty list."""
    return max((task.id for task in tasks), default=0) + 1


def renumber(tasks: List[Task]) -> None:
    """Reassign ids 1..N in the current order of the list."""
    for position, task in enumerate(tasks, start=1):
        task.id = position


class TaskRepository:
    """Repository for managing tasks with storage backend.

    Attributes:
        storage: Storage backend for persisting tasks
        tasks: Current task list, ordered by id
    """

    def __init__(self, storage: Optional[Storage] = None):
        """Initialize TaskRepository and load the persisted task list.

        Args:
            storage: Storage implementation to use. If None, uses JsonStorage
                    with the default per-user file.
        """
        self.storage = storage or JsonStorage()
        self.tasks: List[Task] = sorted(self.storage.load(), key=lambda task: task.id)

    def add_task(self, description: str) -> Task:
        """Create a new task.

        Args:
            description: Task text. Surrounding whitespace is trimmed.

        Returns:
            The created Task object with assigned ID

        Raises:
            ValueError: If the description is empty after trimming
        """
        description = description.strip()
        if not description:
            raise ValueError("Task description cannot be empty")

        task = Task(id=next_id(self.tasks), description=description)
        self.tasks.append(task)
        self.storage.save(self.tasks)

        return task

    def get_all_tasks(self, done: Optional[bool] = None) -> List[Task]:
        """Get all tasks, optionally filtered by completion state.

        Args:
            done: If given, only tasks whose done flag matches are returned.

        Returns:
            List of Task objects, sorted by ID
        """
        tasks = sorted(self.tasks, key=lambda task: task.id)
        if done is None:
            return tasks
        return [task for task in tasks if task.done == done]

    def get_task(self, task_id: int) -> Optional[Task]:
        """Get a specific task by ID.

        Returns:
            Task object if found, None otherwise
        """
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def mark_done(self, task_id: int) -> Optional[Task]:
        """Mark a task as done.

        A task that is already done is returned as is and nothing is saved.

        Args:
            task_id: ID of the task to mark as done

        Returns:
            The Task if found, None if it doesn't exist
        """
        task = self.get_task(task_id)
        if task is None or task.done:
            return task

        task.done = True
        self.storage.save(self.tasks)

        return task

    def delete_task(self, task_id: int) -> Optional[Task]:
        """Delete a task by ID and renumber the tasks after it.

        Args:
            task_id: ID of the task to delete

        Returns:
            The removed Task, or None if it didn't exist
        """
        task = self.get_task(task_id)
        if task is None:
            return None

        self.tasks = [other for other in self.tasks if other is not task]
        renumber(self.tasks)
        self.storage.save(self.tasks)

        return task
