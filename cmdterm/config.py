"""Terminal configuration.

Everything is optional. Without a config file the terminal replays
commands.txt if present, prompts with "> " otherwise, and keeps bookmarks
in bookmarks.db. Example cmdterm.yaml:

    commands_file: commands.txt
    prompt: "> "
    commands:
      hello:
        enabled: false
      bk:
        db_path: data/bookmarks.db
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from cmdterm.db import DB_PATH

CONFIG_PATH = Path(os.getenv("CMDTERM_CONFIG", "cmdterm.yaml"))


class ConfigError(Exception):
    """Config file exists but cannot be read or validated."""


class CommandSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = True


class BookmarkSettings(CommandSettings):
    db_path: Path = DB_PATH


class CommandsConfig(BaseModel):
    """Per-command settings. Unknown command names are kept in model_extra."""
    model_config = ConfigDict(extra="allow")

    ping: CommandSettings = CommandSettings()
    count: CommandSettings = CommandSettings()
    times: CommandSettings = CommandSettings()
    hello: CommandSettings = CommandSettings()
    bk: BookmarkSettings = BookmarkSettings()
    help: CommandSettings = CommandSettings()

    @field_validator("*", mode="before")
    @classmethod
    def _empty_means_defaults(cls, value):
        # "hello:" with nothing under it
        return {} if value is None else value

    def unknown_names(self) -> list[str]:
        return list(self.model_extra or {})


class TerminalConfig(BaseModel):
    commands_file: Path = Path("commands.txt")
    prompt: str = "> "
    commands: CommandsConfig = CommandsConfig()

    @field_validator("commands", mode="before")
    @classmethod
    def _no_commands_means_defaults(cls, value):
        return {} if value is None else value

    def is_enabled(self, name: str) -> bool:
        return getattr(self.commands, name).enabled


def load_config(path: Path = CONFIG_PATH) -> TerminalConfig:
    """Load config from YAML, or defaults if the file does not exist."""
    if not path.exists():
        return TerminalConfig()
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return TerminalConfig.model_validate(data)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e
