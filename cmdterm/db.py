import logging
import sqlite3
from pathlib import Path

from cmdterm.models import Bookmark

log = logging.getLogger(__name__)

DB_PATH = Path("bookmarks.db")


def _escape_like(query: str) -> str:
    """Escape LIKE wildcards so the query matches literally."""
    return query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class BookmarkStore:
    """Append-only bookmark table in a local SQLite file.

    The connection stays open for the lifetime of the store. Opening is
    idempotent: the table is created only if it does not exist yet.
    Raises sqlite3.Error (or OSError for the parent directory) if the
    file cannot be opened.
    """

    def __init__(self, path: Path = DB_PATH):
        self.path = Path(path)
        if self.path.parent != Path("."):
            self.path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(self.path)
        try:
            self._conn.execute("""
                CREATE TABLE IF NOT EXISTS bookmarks (
                    name TEXT NOT NULL,
                    url  TEXT NOT NULL
                )
            """)
            self._conn.commit()
        except sqlite3.Error:
            self._conn.close()
            raise
        log.info(f"Opened bookmark store at {self.path}")

    def insert(self, name: str, url: str):
        """Add a bookmark."""
        self._conn.execute(
            "INSERT INTO bookmarks (name, url) VALUES (?, ?)",
            (name, url),
        )
        self._conn.commit()

    def find_containing(self, query: str) -> list[Bookmark]:
        """Get bookmarks whose name contains query, oldest first."""
        cursor = self._conn.execute(
            """
            SELECT name, url
            FROM bookmarks
            WHERE name LIKE ? ESCAPE '\\'
            ORDER BY rowid
            """,
            (f"%{_escape_like(query)}%",),
        )
        return [Bookmark(name=r[0], url=r[1]) for r in cursor.fetchall()]

    def close(self):
        self._conn.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
