"""Input sources for a terminal session.

A session reads commands either by replaying a file or by prompting on
an interactive stream. The mode is picked once, by trying to open the
commands file, and never changes afterwards.

The two modes treat the "stop" sentinel differently. Replay forwards the
stop line to the router (where it is a no-op) and then ends. Interactive
mode ends on stop without forwarding it.
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import BinaryIO, TextIO

from cmdterm.router import STOP, LineRouter

log = logging.getLogger(__name__)

COMMANDS_FILE = Path("commands.txt")
PROMPT = "> "


class InputMode(Enum):
    UNINITIALIZED = "uninitialized"
    FILE_REPLAY = "file_replay"
    INTERACTIVE = "interactive"
    TERMINATED = "terminated"


class Session:
    """Drives a LineRouter from a replay file or an interactive stream."""

    def __init__(
        self,
        router: LineRouter,
        commands_file: Path = COMMANDS_FILE,
        prompt: str = PROMPT,
        input: TextIO = sys.stdin,
        output: TextIO = sys.stdout,
    ):
        self.router = router
        self.commands_file = Path(commands_file)
        self.prompt = prompt
        self.input = input
        self.output = output
        self.mode = InputMode.UNINITIALIZED

    def run(self):
        """Run the session until its input source is exhausted or stopped."""
        if self.mode is not InputMode.UNINITIALIZED:
            raise RuntimeError(f"Session already ran (mode: {self.mode.value})")

        try:
            source = open(self.commands_file, "rb")
        except OSError as e:
            log.info(f"No commands file ({e}), switching to interactive mode")
            self.output.write(
                f"Could not open {self.commands_file}. "
                "Reading from stdin instead (type 'stop' to quit):\n"
            )
            self.mode = InputMode.INTERACTIVE
            self._run_interactive()
        else:
            log.info(f"Replaying commands from {self.commands_file}")
            self.mode = InputMode.FILE_REPLAY
            with source:
                self._run_replay(source)

        self.mode = InputMode.TERMINATED
        log.info("Session terminated")

    def _run_replay(self, source: BinaryIO):
        for lineno, raw in enumerate(source, start=1):
            try:
                line = raw.decode("utf-8").rstrip("\r\n")
            except UnicodeDecodeError:
                log.warning(f"Skipping line {lineno} of {self.commands_file}: not valid UTF-8")
                continue

            self.router.dispatch(line)
            if line.strip() == STOP:
                log.info(f"Stop sentinel at line {lineno}")
                return

    def _run_interactive(self):
        while True:
            self.output.write(self.prompt)
            self.output.flush()

            try:
                line = self.input.readline()
            except KeyboardInterrupt:
                self.output.write("\n")
                return
            except (OSError, UnicodeDecodeError) as e:
                log.error(f"Failed to read input: {e}")
                self.output.write(f"Error reading line: {e}\n")
                return

            # EOF
            if not line:
                return

            trimmed = line.strip()
            if trimmed == STOP:
                return
            self.router.dispatch(trimmed)
