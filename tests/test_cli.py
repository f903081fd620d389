# tests/test_cli.py

from __future__ import annotations

from pathlib import Path

from todo_tracker.config import Settings
from todo_tracker.cli.main import main


def test_scenario_add_list_done(run_cli, settings: Settings) -> None:
    path = settings.todo_file
    assert not path.exists()

    code, out, _ = run_cli("add", "buy milk")
    assert code == 0
    assert path.read_text(encoding="utf-8") == "0 buy milk\n"
    assert out.splitlines() == ["1. [ ] buy milk"]

    code, out, _ = run_cli("list")
    assert code == 0
    assert out.splitlines() == ["1. [ ] buy milk"]

    code, _, _ = run_cli("done", "1")
    assert code == 0
    assert path.read_text(encoding="utf-8") == "1 buy milk\n"

    _, out, _ = run_cli("list")
    assert out.splitlines() == ["1. [X] buy milk"]


def test_remove_renumbers(run_cli) -> None:
    for text in ("one", "two", "three"):
        run_cli("add", text)

    code, out, _ = run_cli("remove", "2")
    assert code == 0
    assert out.splitlines() == ["1. [ ] one", "2. [ ] three"]


def test_remove_out_of_range_keeps_file(run_cli, settings: Settings) -> None:
    run_cli("add", "only")
    before = settings.todo_file.read_text(encoding="utf-8")

    code, out, _ = run_cli("remove", "5")
    assert code == 0
    assert out.splitlines()[0] == "Invalid task index."
    assert settings.todo_file.read_text(encoding="utf-8") == before


def test_reset_then_list(run_cli) -> None:
    run_cli("add", "a")
    run_cli("add", "b")

    code, out, _ = run_cli("reset")
    assert code == 0
    assert out.strip() == "All tasks have been reset."

    _, out, _ = run_cli("list")
    assert out.strip() == "No tasks available."


def test_no_command_prints_usage_and_exits_1(run_cli) -> None:
    code, out, _ = run_cli()
    assert code == 1
    assert out.strip() == "Usage: todo [COMMAND] [ARGUMENTS]"


def test_unknown_command_exits_0(run_cli) -> None:
    code, out, _ = run_cli("frobnicate")
    assert code == 0
    assert out.strip() == "Invalid command."


def test_non_numeric_index_exits_nonzero(run_cli, settings: Settings) -> None:
    run_cli("add", "a")
    code, out, _ = run_cli("done", "x")
    assert code != 0
    assert "Invalid argument" in out
    assert settings.todo_file.read_text(encoding="utf-8") == "0 a\n"


def test_unreadable_existing_file_is_not_overwritten(tmp_path: Path, capsys) -> None:
    # the todo "file" is a directory: it exists but cannot be read
    settings = Settings(todo_file=tmp_path, log_level="CRITICAL", log_file=None)

    code = main(["add", "lost"], settings=settings)
    out, err = capsys.readouterr()

    assert code == 1
    assert "1. [ ] lost" in out
    assert "Warning: could not save tasks" in err
    assert "left unchanged" in err
    assert tmp_path.is_dir()


def test_log_file_receives_debug_records(tmp_path: Path, capsys) -> None:
    log_file = tmp_path / "logs" / "todo.log"
    settings = Settings(todo_file=tmp_path / "todo.txt", log_level="WARNING", log_file=log_file)

    assert main(["add", "logged"], settings=settings) == 0
    capsys.readouterr()

    assert "Dispatching add" in log_file.read_text(encoding="utf-8")


def test_first_run_reports_no_saved_tasks(run_cli) -> None:
    _, out, err = run_cli("list")
    assert "No saved tasks found." in err
    assert out.strip() == "No tasks available."

    run_cli("add", "a")
    _, _, err = run_cli("list")
    assert "No saved tasks found." not in err


def test_non_utf8_file_survives_add(run_cli, settings: Settings) -> None:
    settings.todo_file.write_bytes(b"0 caf\xe9\n1 buy milk\n")

    code, out, _ = run_cli("add", "new")
    assert code == 0
    assert "1. [ ] caf\\xe9" in out
    assert settings.todo_file.read_bytes() == b"0 caf\xe9\n1 buy milk\n0 new\n"


def test_non_utf8_argument_is_saved(run_cli, settings: Settings) -> None:
    word = b"caf\xe9".decode("utf-8", "surrogateescape")

    code, out, _ = run_cli("add", word)
    assert code == 0
    assert "1. [ ] caf\\xe9" in out
    assert settings.todo_file.read_bytes() == b"0 caf\xe9\n"


def test_save_failure_surfaces_warning(tmp_path: Path, capsys) -> None:
    settings = Settings(todo_file=tmp_path / "missing" / "todo.txt", log_level="CRITICAL", log_file=None)

    code = main(["add", "lost"], settings=settings)
    out, err = capsys.readouterr()

    assert code == 1
    assert "1. [ ] lost" in out
    assert "Warning: could not save tasks" in err
