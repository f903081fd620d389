# src/todo_tracker/tasks/task_ops.py

"""
In-memory task list operations.

Nothing here touches the disk: the store loads a TaskList, the dispatcher
applies one operation, and the store writes it back if it changed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .task_models import Task

logger = logging.getLogger(__name__)

EMPTY_LIST_LINE = "No tasks available."


class TaskListing:
    """
    Display view over a TaskList.

    Every iteration starts over and numbers tasks from the list's current
    state, so the same listing can be printed again after a mutation.
    """

    def __init__(self, tasks: TaskList) -> None:
        self._tasks = tasks

    def __iter__(self) -> Iterator[str]:
        if not len(self._tasks):
            yield EMPTY_LIST_LINE
            return
        for pos, task in enumerate(self._tasks, start=1):
            yield format_task_line(pos, task)


def format_task_line(pos: int, task: Task) -> str:
    mark = "X" if task.completed else " "
    return f"{pos}. [{mark}] {task.description}"


class TaskList:
    """Ordered tasks; insertion order is file order and display order."""

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._items: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._items)

    def __getitem__(self, pos: int) -> Task:
        return self._items[pos]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TaskList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"TaskList({self._items!r})"

    def _in_bounds(self, index: int) -> bool:
        return 1 <= index <= len(self._items)

    # ---- operations ----

    def add(self, description: str) -> Task:
        task = Task(description=description.strip())
        self._items.append(task)
        logger.debug("Added task #%d: %r", len(self._items), task.description)
        return task

    def remove(self, index: int) -> bool:
        """Delete the task at 1-based `index`; False if out of range."""
        if not self._in_bounds(index):
            logger.debug("remove: index %d out of range (len=%d)", index, len(self._items))
            return False
        removed = self._items.pop(index - 1)
        logger.debug("Removed task #%d: %r", index, removed.description)
        return True

    def mark_done(self, index: int) -> bool:
        if not self._in_bounds(index):
            logger.debug("done: index %d out of range (len=%d)", index, len(self._items))
            return False
        self._items[index - 1].completed = True
        return True

    def reset(self) -> None:
        logger.debug("Reset: dropping %d task(s)", len(self._items))
        self._items.clear()

    def listing(self) -> TaskListing:
        return TaskListing(self)

    def to_list(self) -> list[Task]:
        return list(self._items)
