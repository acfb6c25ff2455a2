"""Terminal command handlers.

Commands are organized by category:
- basic: ping, count, times, hello, help
- bookmark: bk

Each command is a Command subclass with a name and an execute(args)
method that returns the text to show the user.
"""

from .base import Command
from .basic import CountCommand, HelloCommand, HelpCommand, PingCommand, TimesCommand
from .bookmark import BookmarkCommand
from .registry import CommandRegistry, load_commands_from_config

__all__ = [
    "Command",
    "PingCommand",
    "CountCommand",
    "TimesCommand",
    "HelloCommand",
    "HelpCommand",
    "BookmarkCommand",
    "CommandRegistry",
    "load_commands_from_config",
]
