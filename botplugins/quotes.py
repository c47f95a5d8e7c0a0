"""Jokes and curses kept in small SQLite tables."""

from __future__ import annotations

import sqlite3
import threading

MIN_LEVEL = "min"
MAX_LEVEL = "max"

CURSE_KEYWORDS = (
    "他妈", "公交车", "你妈", "操", "屎", "去死", "快死", "我日", "逼", "尼玛",
    "艾滋", "癌症", "有病", "烦你", "你爹", "屮", "cnm",
)


class _Book:
    _schema = ""

    def __init__(self, path: str = ":memory:") -> None:
        self._conn = sqlite3.connect(path, check_same_thread=False)
        self._lock = threading.Lock()
        with self._lock, self._conn:
            self._conn.execute(self._schema)

    def __enter__(self):
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _query(self, sql: str, params: tuple = ()) -> list[tuple]:
        with self._lock, self._conn:
            return self._conn.execute(sql, params).fetchall()

    def _insert(self, sql: str, params: tuple) -> int:
        with self._lock, self._conn:
            return self._conn.execute(sql, params).lastrowid

    def close(self) -> None:
        with self._lock:
            self._conn.close()


class JokeBook(_Book):
    """Jokes in which ``%name`` stands for the person they are told about."""

    _schema = "CREATE TABLE IF NOT EXISTS jokes (id INTEGER PRIMARY KEY NOT NULL, text TEXT NOT NULL)"

    def add(self, text: str) -> int:
        return self._insert("INSERT INTO jokes (text) VALUES (?)", (text,))

    def pick(self, name: str) -> str:
        """Return a random joke told about ``name``."""
        rows = self._query("SELECT text FROM jokes ORDER BY RANDOM() LIMIT 1")
        if not rows:
            raise LookupError("no jokes")
        return rows[0][0].replace("%name", name)

    def close(self) -> None:
        super().close()


class CurseBook(_Book):
    """Curses graded by level."""

    _schema = (
        "CREATE TABLE IF NOT EXISTS curse (id INTEGER PRIMARY KEY NOT NULL, "
        "text TEXT NOT NULL, level TEXT NOT NULL)"
    )

    def add(self, text: str, level: str) -> int:
        return self._insert("INSERT INTO curse (text, level) VALUES (?, ?)", (text, level))

    def random(self, level: str) -> str:
        """Return a random curse of the level, or an empty string if there is none."""
        rows = self._query(
            "SELECT text FROM curse WHERE level = ? ORDER BY RANDOM() LIMIT 1", (level,)
        )
        return rows[0][0] if rows else ""

    def close(self) -> None:
        super().close()