"""Single-user command-line task tracker backed by a flat `todo.txt` file."""

__version__ = "0.1.0"
