"""Command-line interface for taskforge.

This module provides the CLI interface for managing tasks using argparse.
It supports the following commands:
- add: Create a new task
- list: Show tasks as a table, optionally filtered by status
- done: Mark a task as completed
- delete: Delete a task and renumber the rest
"""

import argparse
import sys
from typing import List, Optional

from taskforge import __version__
from taskforge.logging_setup import setup_logging
from taskforge.models import Task
from taskforge.repository import TaskRepository

DATE_FORMAT = "%Y-%m-%d %H:%M"
STATUS_LABELS = {True: "done", False: "todo"}


def task_id(value: str) -> int:
    """argparse type for task ids: a positive integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid task id: {value!r} is not a number")
    if number < 1:
        raise argparse.ArgumentTypeError(f"invalid task id: {value!r} must be 1 or greater")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="taskforge",
        description="CLI task manager"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging on stderr"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Add command
    add_parser = subparsers.add_parser("add", help="Add a task")
    add_parser.add_argument("description", nargs="+", help="Task description")

    # List command
    list_parser = subparsers.add_parser("list", help="List tasks")
    list_parser.add_argument(
        "--status",
        choices=["todo", "done"],
        help="Only show tasks with this status"
    )

    # Done command
    done_parser = subparsers.add_parser("done", help="Mark a task as done")
    done_parser.add_argument("id", type=task_id, help="Task ID")

    # Delete command
    delete_parser = subparsers.add_parser("delete", help="Delete a task")
    delete_parser.add_argument("id", type=task_id, help="Task ID")

    return parser


def render_table(tasks: List[Task]) -> str:
    """Format tasks as a plain-text table with ID, Status, Task and Created columns."""
    headers = ["ID", "Status", "Task", "Created"]
    rows = [
        [
            str(task.id),
            STATUS_LABELS[task.done],
            task.description,
            task.created_at.strftime(DATE_FORMAT),
        ]
        for task in tasks
    ]

    widths = [len(h) for h in headers]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

    def fmt(cells: List[str]) -> str:
        return "  ".join(cell.ljust(w) for cell, w in zip(cells, widths)).rstrip()

    lines = [fmt(headers), fmt(["-" * w for w in widths])]
    lines.extend(fmt(row) for row in rows)
    return "\n".join(lines)


def _save_failed(error: OSError) -> int:
    print(f"Error: could not save tasks: {error}", file=sys.stderr)
    return 1


def cmd_add(args: argparse.Namespace, repo: TaskRepository) -> int:
    """Handle the 'add' command.

    Args:
        args: Parsed command-line arguments
        repo: TaskRepository instance

    Returns:
        Exit code (0 for success or an empty description, 1 if saving failed)
    """
    try:
        task = repo.add_task(" ".join(args.description))
    except ValueError:
        print("Warning: Task description cannot be empty. Nothing added.", file=sys.stderr)
        return 0
    except OSError as e:
        return _save_failed(e)

    print(f"Added task #{task.id}: {task.description}")
    return 0


def cmd_list(args: argparse.Namespace, repo: TaskRepository) -> int:
    """Handle the 'list' command.

    Args:
        args: Parsed command-line arguments
        repo: TaskRepository instance

    Returns:
        Exit code (always 0)
    """
    done = None if args.status is None else args.status == "done"
    tasks = repo.get_all_tasks(done=done)

    if not tasks:
        if args.status:
            print(f"No {args.status} tasks.")
        else:
            print("No tasks yet. Add one with: taskforge add <description>")
        return 0

    print(render_table(tasks))
    return 0


def cmd_done(args: argparse.Namespace, repo: TaskRepository) -> int:
    """Handle the 'done' command.

    Args:
        args: Parsed command-line arguments
        repo: TaskRepository instance

    Returns:
        Exit code (0 for success, 1 for error)
    """
    task = repo.get_task(args.id)

    if task is None:
        print(f"Error: Task #{args.id} not found.", file=sys.stderr)
        return 1

    if task.done:
        print(f"Task #{task.id} is already done: {task.description}")
        return 0

    try:
        repo.mark_done(args.id)
    except OSError as e:
        return _save_failed(e)

    print(f"Completed task #{task.id}: {task.description}")
    return 0


def cmd_delete(args: argparse.Namespace, repo: TaskRepository) -> int:
    """Handle the 'delete' command.

    Args:
        args: Parsed command-line arguments
        repo: TaskRepository instance

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        task = repo.delete_task(args.id)
    except OSError as e:
        return _save_failed(e)

    if task is None:
        print(f"Error: Task #{args.id} not found.", file=sys.stderr)
        return 1

    print(f"Deleted task #{args.id}: {task.description}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:]

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    setup_logging(verbose=args.verbose)

    # Load before dispatch
    repo = TaskRepository()

    commands = {
        "add": cmd_add,
        "list": cmd_list,
        "done": cmd_done,
        "delete": cmd_delete,
    }

    return commands[args.command](args, repo)


if __name__ == "__main__":
    sys.exit(main())
