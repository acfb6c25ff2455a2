"""Basic commands: ping, count, times, hello, help."""

from typing import Callable

from .base import Command


class PingCommand(Command):
    @property
    def name(self) -> str:
        return "ping"

    def execute(self, args: list[str]) -> str:
        return "pong!"


class CountCommand(Command):
    """Reports how many arguments it was given."""

    @property
    def name(self) -> str:
        return "count"

    def execute(self, args: list[str]) -> str:
        return f"counted {len(args)} args"


class TimesCommand(Command):
    """Counts its own invocations for the lifetime of the session."""

    def __init__(self):
        self.calls = 0

    @property
    def name(self) -> str:
        return "times"

    def execute(self, args: list[str]) -> str:
        self.calls += 1
        return f"command called {self.calls} times"


class HelloCommand(Command):
    @property
    def name(self) -> str:
        return "hello"

    def execute(self, args: list[str]) -> str:
        if not args:
            return "Hello, world!"
        return f"Hello, {' '.join(args)}!"


class HelpCommand(Command):
    """Lists registered command names.

    Takes a callable rather than the registry itself so the listing
    always reflects what is registered at call time.
    """

    def __init__(self, list_names: Callable[[], list[str]]):
        self._list_names = list_names

    @property
    def name(self) -> str:
        return "help"

    def execute(self, args: list[str]) -> str:
        return f"Available commands: {', '.join(self._list_names())}"
