from __future__ import annotations

import importlib
import io
import logging
import sys

import pytest

import cmdterm.main as main_module


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main_module, "CONFIG_PATH", tmp_path / "cmdterm.yaml")
    return tmp_path


def test_replays_commands_file_with_bookmarks(workdir, capsys) -> None:
    (workdir / "commands.txt").write_text(
        "ping\nbk add foo http://x\nbk search fo\nbk search zz\nPING\nstop\nhello\n"
    )

    assert main_module.main() == 0

    assert capsys.readouterr().out == (
        "pong!\n"
        "Bookmark added successfully.\n"
        "Search results for 'fo':\n"
        "  foo -> http://x\n"
        "Search results for 'zz':\n"
        "  No bookmarks found.\n"
        "Unknown command: 'PING'. Did you mean 'ping'?\n"
    )
    assert (workdir / "bookmarks.db").exists()


def test_bookmarks_persist_between_sessions(workdir, capsys) -> None:
    (workdir / "commands.txt").write_text("bk add docs https://docs.python.org\n")
    main_module.main()
    (workdir / "commands.txt").write_text("bk search doc\n")
    capsys.readouterr()

    main_module.main()

    assert capsys.readouterr().out == (
        "Search results for 'doc':\n  docs -> https://docs.python.org\n"
    )


def test_interactive_when_no_commands_file(workdir, capsys, monkeypatch) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("times\ntimes\nstop\nping\n"))

    assert main_module.main() == 0

    assert capsys.readouterr().out == (
        "Could not open commands.txt. Reading from stdin instead (type 'stop' to quit):\n"
        "> command called 1 times\n"
        "> command called 2 times\n"
        "> "
    )


def test_config_disables_commands(workdir, capsys) -> None:
    (workdir / "cmdterm.yaml").write_text(
        "commands_file: script.txt\ncommands:\n  hello:\n    enabled: false\n  bk:\n    enabled: false\n"
    )
    (workdir / "script.txt").write_text("hello\nhelp\n")

    main_module.main()

    assert capsys.readouterr().out == (
        "Unknown command: 'hello'.\n"
        "Available commands: ping, count, times, help\n"
    )
    assert not (workdir / "bookmarks.db").exists()


def test_invalid_config_falls_back_to_defaults(workdir, capsys) -> None:
    (workdir / "cmdterm.yaml").write_text("commands: [1, 2]\n")
    (workdir / "commands.txt").write_text("ping\n")

    assert main_module.main() == 0

    out = capsys.readouterr().out
    assert out.startswith("Invalid config ")
    assert out.endswith("Using defaults.\npong!\n")


@pytest.mark.parametrize("db_path", ["", "5"])
def test_bad_bookmark_path_in_config_falls_back_to_defaults(workdir, capsys, db_path: str) -> None:
    (workdir / "cmdterm.yaml").write_text(f"commands:\n  bk:\n    db_path: {db_path}\n")
    (workdir / "commands.txt").write_text("ping\nbk add foo http://x\n")

    assert main_module.main() == 0

    out = capsys.readouterr().out
    assert out.startswith("Invalid config ")
    assert out.endswith("Using defaults.\npong!\nBookmark added successfully.\n")
    assert (workdir / "bookmarks.db").exists()


def test_string_false_disables_command(workdir, capsys) -> None:
    (workdir / "cmdterm.yaml").write_text("commands:\n  hello:\n    enabled: 'false'\n")
    (workdir / "commands.txt").write_text("hello\n")

    main_module.main()

    assert capsys.readouterr().out == "Unknown command: 'hello'.\n"


@pytest.mark.parametrize(
    ("name", "expected"),
    [("debug", logging.DEBUG), ("INFO", logging.INFO), (" warn ", logging.WARNING),
     ("verbose", logging.WARNING), ("", logging.WARNING)],
)
def test_log_level_names(name: str, expected: int) -> None:
    assert main_module.log_level(name) == expected


def test_unknown_log_level_does_not_break_import(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    reloaded = importlib.reload(main_module)

    assert callable(reloaded.main)


def test_unopenable_commands_file_falls_back_to_interactive(workdir, capsys, monkeypatch) -> None:
    (workdir / "commands.txt").mkdir()
    monkeypatch.setattr(sys, "stdin", io.StringIO("ping\n"))

    assert main_module.main() == 0

    assert capsys.readouterr().out == (
        "Could not open commands.txt. Reading from stdin instead (type 'stop' to quit):\n"
        "> pong!\n"
        "> "
    )
