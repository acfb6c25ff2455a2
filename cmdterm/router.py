import logging
import sys
from typing import TextIO

from cmdterm.commands import CommandRegistry

log = logging.getLogger(__name__)

STOP = "stop"


class LineRouter:
    """Splits a raw line into command name and arguments and runs it."""

    def __init__(self, registry: CommandRegistry, output: TextIO = sys.stdout):
        self.registry = registry
        self.output = output

    def dispatch(self, raw_line: str):
        # Whitespace split only, no quoting
        parts = raw_line.split()
        if not parts:
            return

        command_name, args = parts[0], parts[1:]

        # The input source decides whether "stop" ends the session
        if command_name == STOP:
            return

        command = self.registry.find(command_name)
        if command is None:
            self._unknown(command_name)
            return

        log.debug(f"Dispatching {command_name} with {len(args)} args")
        try:
            response = command.execute(args)
        except Exception as e:
            log.exception(f"Command {command_name} failed")
            response = f"Command '{command_name}' failed: {e}"

        if response:
            self.output.write(f"{response}\n")

    def _unknown(self, command_name: str):
        message = f"Unknown command: '{command_name}'."
        suggestion = self.registry.suggest(command_name)
        if suggestion is not None:
            message += f" Did you mean '{suggestion.name}'?"
        log.info(f"Unknown command: {command_name}")
        self.output.write(f"{message}\n")
