"""A store of fan essays, keyed by a hash of their text."""

from __future__ import annotations

import hashlib
import sqlite3
import struct
import threading

HENTAI_ID = -3802576048116006195


def essay_id(text: str) -> int:
    """Signed 64-bit id from the first eight bytes of the text's MD5, little endian."""
    digest = hashlib.md5(text.encode("utf-8")).digest()
    return struct.unpack("<q", digest[:8])[0]


class EssayStore:
    """SQLite table of essays."""

    def __init__(self, path: str = ":memory:") -> None:
        self._conn = sqlite3.connect(path, check_same_thread=False)
        self._lock = threading.Lock()
        with self._lock, self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS text (id INTEGER PRIMARY KEY NOT NULL, data TEXT NOT NULL)"
            )

    def __enter__(self) -> "EssayStore":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _one(self, sql: str, params: tuple = ()) -> tuple | None:
        with self._lock:
            return self._conn.execute(sql, params).fetchone()

    def add(self, text: str) -> int:
        """Store an essay and return its id."""
        key = essay_id(text)
        with self._lock, self._conn:
            self._conn.execute("INSERT OR REPLACE INTO text (id, data) VALUES (?, ?)", (key, text))
        return key

    def random(self) -> str:
        row = self._one("SELECT data FROM text ORDER BY RANDOM() LIMIT 1")
        if row is None:
            raise LookupError("no essays")
        return row[0]

    def hentai(self) -> str:
        """Return the one essay kept for a fit of madness."""
        row = self._one("SELECT data FROM text WHERE id = ?", (HENTAI_ID,))
        if row is None:
            raise LookupError("essay not found")
        return row[0]

    def count(self) -> int:
        row = self._one("SELECT COUNT(*) FROM text")
        return row[0] if row else 0

    def close(self) -> None:
        with self._lock:
            self._conn.close()