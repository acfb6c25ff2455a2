#!/usr/bin/env python3
"""cmdterm - replay commands.txt, or prompt for commands on stdin."""

import logging
import os
import sys

from cmdterm.commands import load_commands_from_config
from cmdterm.config import CONFIG_PATH, ConfigError, TerminalConfig, load_config
from cmdterm.router import LineRouter
from cmdterm.session import Session


def log_level(name: str) -> int:
    """Numeric level for a level name; WARNING if the name is unknown."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


logging.basicConfig(
    level=log_level(os.getenv("LOG_LEVEL", "WARNING")),
    format="%(asctime)s [%(levelname)s] %(message)s"
)
log = logging.getLogger(__name__)


def main() -> int:
    """Run one terminal session on stdin/stdout."""
    try:
        config = load_config(CONFIG_PATH)
    except ConfigError as e:
        log.error(str(e))
        print(f"{e}. Using defaults.")
        config = TerminalConfig()

    registry = load_commands_from_config(config, output=sys.stdout)
    router = LineRouter(registry, output=sys.stdout)
    session = Session(
        router,
        commands_file=config.commands_file,
        prompt=config.prompt,
        input=sys.stdin,
        output=sys.stdout,
    )

    try:
        session.run()
    except KeyboardInterrupt:
        log.info("Shutting down...")
    finally:
        registry.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
