"""taskforge - a small command-line task list manager."""

__version__ = "1.0.0"
