# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass(slots=True)
class Task:
    """
    A single to-do item.

    Tasks carry no id: a task is addressed by its 1-based position in the
    list at the time of the command, so positions shift after a removal.
    """

    description: str
    completed: bool = False


_INDEX_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class ParsedIndex:
    """Result of parsing a user-supplied task number."""

    value: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.value is not None

    @classmethod
    def parse(cls, raw: str) -> ParsedIndex:
        text = raw.strip()
        # ASCII digits only: int() would also take "1_0" and non-Latin digits
        if not _INDEX_RE.fullmatch(text):
            return cls(error=f"Invalid argument: {raw!r} is not a task number.")
        return cls(value=int(text))


@dataclass(frozen=True, slots=True)
class SaveResult:
    ok: bool
    error: str | None = None


@dataclass(slots=True)
class LoadResult:
    tasks: list[Task] = field(default_factory=list)
    found: bool = False
    skipped: int = 0
    # set when the file exists but could not be read; it must not be overwritten
    error: str | None = None
