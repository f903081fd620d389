# src/todo_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from ..tasks.task_models import ParsedIndex
from ..tasks.task_ops import TaskList

logger = logging.getLogger(__name__)

USAGE = "Usage: todo [COMMAND] [ARGUMENTS]"
INVALID_COMMAND = "Invalid command."
INVALID_INDEX = "Invalid task index."
RESET_DONE = "All tasks have been reset."

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_BAD_ARGUMENT = 2


@dataclass(slots=True)
class CommandOutcome:
    """What a command produced: lines for stdout, exit code, and whether to save."""

    lines: list[str] = field(default_factory=list)
    exit_code: int = EXIT_OK
    mutated: bool = False


CommandHandler = Callable[[TaskList, list[str]], CommandOutcome]


class CommandRegistry:
    """Maps the first CLI argument to a handler (list, add, remove, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, tasks: TaskList, argv: Sequence[str]) -> CommandOutcome:
        """
        Dispatch argv (without the program name) against `tasks`.

        No command -> usage and exit code 1.
        Unknown command -> "Invalid command." and exit code 0.
        """
        if not argv:
            return CommandOutcome(lines=[USAGE], exit_code=EXIT_USAGE)

        name = argv[0].lower()
        args = list(argv[1:])

        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Unknown command %r", argv[0])
            return CommandOutcome(lines=[INVALID_COMMAND])

        logger.debug("Dispatching %s args=%r", name, args)
        return handler(tasks, args)

    def build_help(self) -> str:
        lines = [USAGE, "", "Commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name:<16} {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _listing(tasks: TaskList) -> list[str]:
    return list(tasks.listing())


def _index_arg(args: list[str]) -> ParsedIndex | None:
    if not args:
        return None
    return ParsedIndex.parse(args[0])


def cmd_list(tasks: TaskList, args: list[str]) -> CommandOutcome:
    return CommandOutcome(lines=_listing(tasks))


def cmd_add(tasks: TaskList, args: list[str]) -> CommandOutcome:
    if not args:
        return CommandOutcome(lines=[INVALID_COMMAND])
    tasks.add(" ".join(args))
    return CommandOutcome(lines=_listing(tasks), mutated=True)


def _indexed(tasks: TaskList, args: list[str], op: Callable[[int], bool]) -> CommandOutcome:
    parsed = _index_arg(args)
    if parsed is None:
        return CommandOutcome(lines=[INVALID_COMMAND])
    if not parsed.ok or parsed.value is None:
        return CommandOutcome(lines=[parsed.error or INVALID_COMMAND], exit_code=EXIT_BAD_ARGUMENT)

    if not op(parsed.value):
        return CommandOutcome(lines=[INVALID_INDEX, *_listing(tasks)])
    return CommandOutcome(lines=_listing(tasks), mutated=True)


def cmd_remove(tasks: TaskList, args: list[str]) -> CommandOutcome:
    """
    remove <n>  -> delete task n; later tasks move up one position
    """
    return _indexed(tasks, args, tasks.remove)


def cmd_done(tasks: TaskList, args: list[str]) -> CommandOutcome:
    """
    done <n>    -> mark task n as completed
    """
    return _indexed(tasks, args, tasks.mark_done)


def cmd_reset(tasks: TaskList, args: list[str]) -> CommandOutcome:
    tasks.reset()
    return CommandOutcome(lines=[RESET_DONE], mutated=True)


def cmd_help(tasks: TaskList, args: list[str]) -> CommandOutcome:
    return CommandOutcome(lines=registry.build_help().splitlines())


registry.register("list", cmd_list, help_text="Show all tasks.")
registry.register("add", cmd_add, help_text="add <text...>: append a new task.")
registry.register("remove", cmd_remove, help_text="remove <n>: delete task number n.")
registry.register("done", cmd_done, help_text="done <n>: mark task number n as completed.")
registry.register("reset", cmd_reset, help_text="Delete all tasks.")
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["-h", "--help"])
