"""Book reviews kept in SQLite and found by keyword or at random."""

from __future__ import annotations

import re
import sqlite3
import threading

_KEYWORD = re.compile(r"[\u4e00-\u9fa5A-Za-z0-9]{1,25}")


class ReviewStore:
    """A table of book reviews."""

    def __init__(self, path: str = ":memory:") -> None:
        self._conn = sqlite3.connect(path, check_same_thread=False)
        self._lock = threading.Lock()
        with self._lock, self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS bookreview "
                "(id INTEGER PRIMARY KEY NOT NULL, bookreview TEXT NOT NULL)"
            )

    def __enter__(self) -> "ReviewStore":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _query(self, sql: str, params: tuple = ()) -> list[tuple]:
        with self._lock, self._conn:
            return self._conn.execute(sql, params).fetchall()

    def add(self, text: str) -> int:
        with self._lock, self._conn:
            return self._conn.execute(
                "INSERT INTO bookreview (bookreview) VALUES (?)", (text,)
            ).lastrowid

    def by_keyword(self, keyword: str) -> str:
        """Return a review containing the keyword, or an empty string.

        Keywords are 1 to 25 Chinese letters, English letters or digits.
        """
        if not _KEYWORD.fullmatch(keyword):
            raise ValueError("keyword must be 1 to 25 Chinese letters, letters or digits")
        rows = self._query(
            "SELECT bookreview FROM bookreview WHERE bookreview LIKE ? LIMIT 1",
            (f"%{keyword}%",),
        )
        return rows[0][0] if rows else ""

    def random(self) -> str:
        """Return a random review, or an empty string when there is none."""
        rows = self._query("SELECT bookreview FROM bookreview ORDER BY RANDOM() LIMIT 1")
        return rows[0][0] if rows else ""

    def close(self) -> None:
        with self._lock:
            self._conn.close()