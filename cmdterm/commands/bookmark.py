"""Bookmark command: bk add / bk search, backed by BookmarkStore."""

import logging
import sqlite3

from cmdterm.db import BookmarkStore

from .base import Command

log = logging.getLogger(__name__)

USAGE = "Usage: bk add <name> <url> OR bk search <name>"
ADD_USAGE = "Usage: bk add <name> <url>"
SEARCH_USAGE = "Usage: bk search <name>"


class BookmarkCommand(Command):
    """Saves and searches bookmarks. Owns its store for the whole session."""

    def __init__(self, store: BookmarkStore):
        self.store = store

    @property
    def name(self) -> str:
        return "bk"

    def execute(self, args: list[str]) -> str:
        if not args:
            return USAGE

        subcommand, rest = args[0], args[1:]
        if subcommand == "add":
            if len(rest) != 2:
                return ADD_USAGE
            return self._add(rest[0], rest[1])
        if subcommand == "search":
            if len(rest) != 1:
                return SEARCH_USAGE
            return self._search(rest[0])
        return "Unknown bk subcommand. Use 'add' or 'search'."

    def _add(self, name: str, url: str) -> str:
        try:
            self.store.insert(name, url)
        except sqlite3.Error as e:
            log.error(f"Bookmark insert failed: {e}")
            return f"Error adding bookmark: {e}"
        log.info(f"Added bookmark {name}")
        return "Bookmark added successfully."

    def _search(self, query: str) -> str:
        try:
            results = self.store.find_containing(query)
        except sqlite3.Error as e:
            log.error(f"Bookmark search failed: {e}")
            return f"Error executing search query: {e}"

        lines = [f"Search results for '{query}':"]
        if not results:
            lines.append("  No bookmarks found.")
        lines.extend(f"  {bookmark}" for bookmark in results)
        return "\n".join(lines)

    def close(self):
        self.store.close()
