# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from todo_tracker.cli.main import main
from todo_tracker.config import Settings
from todo_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing at a per-test todo file.

    Built directly instead of via Settings.from_env() so a developer's
    environment or .env never leaks into the tests.
    """
    return Settings(todo_file=tmp_path / "todo.txt", log_level="WARNING", log_file=None)


@pytest.fixture()
def store(settings: Settings) -> TaskStore:
    return TaskStore(settings.todo_file)


@pytest.fixture()
def run_cli(settings: Settings, capsys: pytest.CaptureFixture[str]) -> Callable[..., tuple[int, str, str]]:
    """Run one CLI invocation; returns (exit_code, stdout, stderr)."""

    def _run(*argv: str) -> tuple[int, str, str]:
        code = main(list(argv), settings=settings)
        out, err = capsys.readouterr()
        return code, out, err

    return _run


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """main() reconfigures the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
