# src/todo_tracker/config.py

"""Settings loaded from environment variables (+ optional .env).

- One Settings object per run, built on first use rather than at import.
- With no variables set the tracker keeps `todo.txt` beside the executable.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"
DEFAULT_FILENAME = "todo.txt"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def default_todo_file() -> Path:
    """
    `todo.txt` next to the running executable (argv[0]).

    Under `python -m todo_tracker` argv[0] is the package's `__main__.py`;
    the current directory is used instead of writing into site-packages.
    """
    exe = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if not exe or exe.endswith(".py"):
        return Path.cwd() / DEFAULT_FILENAME
    return Path(exe).resolve().parent / DEFAULT_FILENAME


@dataclass(frozen=True, slots=True)
class Settings:
    todo_file: Path
    log_level: str
    log_file: Path | None

    @staticmethod
    def from_env(*, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        todo_file = _env_path(_k("FILE"), None) or default_todo_file()
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file = _env_path(_k("LOG_FILE"), None)

        return Settings(todo_file=todo_file, log_level=log_level, log_file=log_file)


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
