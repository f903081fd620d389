# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

One pass per invocation: load the task file, dispatch one command,
save if the command changed the list, print, return the exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..config import Settings, get_settings
from ..logging_setup import setup_logging
from ..tasks.task_ops import TaskList
from ..tasks.task_store import TaskStore
from .commands import CommandRegistry
from .commands import registry as command_registry

logger = logging.getLogger(__name__)

EXIT_SAVE_FAILED = 1
NO_SAVED_TASKS = "No saved tasks found."


def _printable(text: str) -> str:
    """Show undecodable argv/file bytes as \\xNN instead of failing on stdout."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


def run(
    argv: Sequence[str],
    *,
    store: TaskStore,
    registry: CommandRegistry = command_registry,
) -> int:
    loaded = store.load()
    if not loaded.found:
        print(NO_SAVED_TASKS, file=sys.stderr)
    if loaded.skipped:
        logger.warning("%d malformed line(s) ignored in %s", loaded.skipped, store.path)
    tasks = TaskList(loaded.tasks)

    outcome = registry.handle(tasks, argv)

    exit_code = outcome.exit_code
    for line in outcome.lines:
        print(_printable(line))

    if outcome.mutated and loaded.error:
        # an existing file we could not read would be replaced by a partial list
        print(
            f"Warning: could not save tasks to {store.path}: "
            f"existing file could not be read ({loaded.error}); left unchanged",
            file=sys.stderr,
        )
        exit_code = EXIT_SAVE_FAILED
    elif outcome.mutated:
        saved = store.save(tasks)
        if not saved.ok:
            print(
                f"Warning: could not save tasks to {store.path}: {saved.error}",
                file=sys.stderr,
            )
            exit_code = EXIT_SAVE_FAILED

    return exit_code


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    if settings is None:
        settings = get_settings()
    if argv is None:
        argv = sys.argv[1:]

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    setup_logging(console_level=console_level, log_file=settings.log_file)

    logger.debug("todo file: %s", settings.todo_file)
    return run(argv, store=TaskStore(settings.todo_file))


if __name__ == "__main__":
    sys.exit(main())
