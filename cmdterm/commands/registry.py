"""Command registry and config-driven loading."""

import logging
import sqlite3
import string
import sys
from typing import Iterator, Optional, TextIO

from cmdterm.config import TerminalConfig
from cmdterm.db import BookmarkStore

from .base import Command

log = logging.getLogger(__name__)

# Only A-Z fold; other characters must match exactly
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


class CommandRegistry:
    """Ordered collection of commands, scanned linearly.

    Duplicate names are allowed; lookups return the first registered.
    """

    def __init__(self):
        self._commands: list[Command] = []

    def register(self, command: Command):
        self._commands.append(command)

    def find(self, name: str) -> Optional[Command]:
        """Exact, case-sensitive lookup."""
        return next((cmd for cmd in self._commands if cmd.name == name), None)

    def suggest(self, name: str) -> Optional[Command]:
        """First command whose name matches ignoring ASCII case."""
        lowered = _ascii_lower(name)
        return next((cmd for cmd in self._commands if _ascii_lower(cmd.name) == lowered), None)

    def names(self) -> list[str]:
        return [cmd.name for cmd in self._commands]

    def close(self):
        """Release resources held by commands (e.g. the bookmark store)."""
        for cmd in self._commands:
            close = getattr(cmd, "close", None)
            if callable(close):
                close()

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)


def load_commands_from_config(config: TerminalConfig, output: TextIO = sys.stdout) -> CommandRegistry:
    """Build the session registry from config.

    A bookmark store that cannot be opened leaves bk out of the registry;
    the failure is reported on output and every other command still loads.
    """
    from .basic import CountCommand, HelloCommand, HelpCommand, PingCommand, TimesCommand
    from .bookmark import BookmarkCommand

    registry = CommandRegistry()

    for name in config.commands.unknown_names():
        log.warning(f"{name} - Not a known command, ignoring")

    if config.is_enabled("ping"):
        registry.register(PingCommand())
    if config.is_enabled("count"):
        registry.register(CountCommand())
    if config.is_enabled("times"):
        registry.register(TimesCommand())
    if config.is_enabled("hello"):
        registry.register(HelloCommand())

    if config.is_enabled("bk"):
        db_path = config.commands.bk.db_path
        try:
            store = BookmarkStore(db_path)
        except (sqlite3.Error, OSError) as e:
            output.write(f"Failed to initialize BookmarkCommand (SQLite error): {e}\n")
            log.warning(f"bk - Store {db_path} unavailable: {e}")
        else:
            registry.register(BookmarkCommand(store))

    if config.is_enabled("help"):
        registry.register(HelpCommand(registry.names))

    log.info(f"Loaded commands: {', '.join(registry.names())}")
    return registry
