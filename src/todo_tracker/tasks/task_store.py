# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .task_models import LoadResult, SaveResult, Task

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "todo.txt"

_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r"}
_UNESCAPES = {"\\": "\\", "n": "\n", "r": "\r"}

# Undecodable bytes (a Latin-1 file, non-UTF-8 argv) ride through as surrogates
# and are written back unchanged.
FILE_ERRORS = "surrogateescape"


def escape_description(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def unescape_description(text: str) -> str:
    out: list[str] = []
    chars = iter(text)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, None)
        if nxt is None:
            # trailing lone backslash: keep it literally
            out.append("\\")
        elif nxt in _UNESCAPES:
            out.append(_UNESCAPES[nxt])
        else:
            out.append("\\" + nxt)
    return "".join(out)


def encode_task(task: Task) -> str:
    """One record: `<0|1> <escaped description>` plus newline."""
    flag = "1" if task.completed else "0"
    return f"{flag} {escape_description(task.description)}\n"


def decode_task(line: str) -> Task | None:
    """
    Parse one record. Returns None for a malformed line.

    Files written before escaping existed decode unchanged, as long as the
    description holds no backslashes.
    """
    parts = line.strip().split(None, 1)
    if not parts or parts[0] not in ("0", "1"):
        return None
    rest = parts[1] if len(parts) > 1 else ""
    return Task(description=unescape_description(rest.strip()), completed=parts[0] == "1")


class TaskStore:
    """
    Flat-file task store.

    The whole list is read at startup and the whole file is rewritten on save.
    There is no locking: two concurrent runs may overwrite each other.
    """

    def __init__(self, path: str | Path = DEFAULT_FILENAME) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LoadResult:
        try:
            with self._path.open("r", encoding="utf-8", errors=FILE_ERRORS) as fh:
                lines = fh.readlines()
        except FileNotFoundError:
            logger.info("No saved tasks found at %s", self._path)
            return LoadResult()
        except OSError as e:
            logger.warning("Cannot read %s: %s", self._path, e)
            return LoadResult(found=True, error=e.strerror or str(e))

        tasks: list[Task] = []
        skipped = 0
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            task = decode_task(line)
            if task is None:
                skipped += 1
                logger.warning("Skipping malformed line %d in %s: %r", lineno, self._path, line.rstrip("\n"))
                continue
            tasks.append(task)

        logger.debug("Loaded %d task(s) from %s (skipped=%d)", len(tasks), self._path, skipped)
        return LoadResult(tasks=tasks, found=True, skipped=skipped)

    def save(self, tasks: Iterable[Task]) -> SaveResult:
        try:
            with self._path.open("w", encoding="utf-8", errors=FILE_ERRORS, newline="\n") as fh:
                for task in tasks:
                    fh.write(encode_task(task))
        except (OSError, UnicodeError) as e:
            logger.warning("Failed to save tasks to %s: %s", self._path, e)
            logger.debug("Save failure details.", exc_info=True)
            return SaveResult(ok=False, error=getattr(e, "strerror", None) or str(e))
        logger.debug("Saved tasks to %s", self._path)
        return SaveResult(ok=True)
