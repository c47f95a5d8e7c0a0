"""Storage of known virtual streamers and of the site cookie."""

from __future__ import annotations

import sqlite3
import threading
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .bili_types import Medal, sort_medals

COOKIE_KEY = "bilbili_cookie"

# Keeps each IN (...) list well below SQLite's bound-parameter limit.
_CHUNK = 500


@dataclass(frozen=True)
class Vup:
    """A virtual streamer known by user id."""

    mid: int
    uname: str = ""
    roomid: int = 0


class VupStore:
    """SQLite tables of streamers and of configuration values."""

    def __init__(self, path: str = ":memory:") -> None:
        self._conn = sqlite3.connect(path, check_same_thread=False)
        self._lock = threading.Lock()
        with self._lock, self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS vup (mid INTEGER PRIMARY KEY NOT NULL, "
                "uname TEXT NOT NULL DEFAULT '', roomid INTEGER NOT NULL DEFAULT 0)"
            )
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS config (key TEXT PRIMARY KEY NOT NULL, "
                "value TEXT NOT NULL DEFAULT '')"
            )

    def __enter__(self) -> "VupStore":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def insert_vup(self, mid: int, uname: str, roomid: int) -> bool:
        """Add a streamer unless one with this id is known; report whether it was added."""
        with self._lock, self._conn:
            cursor = self._conn.execute(
                "INSERT OR IGNORE INTO vup (mid, uname, roomid) VALUES (?, ?, ?)",
                (mid, uname, roomid),
            )
            return cursor.rowcount == 1

    def filter_vups(self, mids: Iterable[int]) -> list[Vup]:
        """Return the known streamers among the given ids, ordered by id."""
        ids = list(dict.fromkeys(mids))
        found: list[Vup] = []
        with self._lock:
            for start in range(0, len(ids), _CHUNK):
                chunk = ids[start:start + _CHUNK]
                marks = ", ".join("?" * len(chunk))
                rows = self._conn.execute(
                    f"SELECT mid, uname, roomid FROM vup WHERE mid IN ({marks})", chunk
                ).fetchall()
                found.extend(Vup(*row) for row in rows)
        return sorted(found, key=lambda v: v.mid)

    def set_cookie(self, cookie: str) -> None:
        with self._lock, self._conn:
            self._conn.execute(
                "REPLACE INTO config (key, value) VALUES (?, ?)", (COOKIE_KEY, cookie)
            )

    def get_cookie(self) -> str:
        """Return the stored cookie, or an empty string when none is set."""
        with self._lock:
            row = self._conn.execute(
                "SELECT value FROM config WHERE key = ?", (COOKIE_KEY,)
            ).fetchone()
        return row[0] if row else ""

    def update_from(self, entries: Iterable[Mapping[str, Any]]) -> int:
        """Insert streamers from entries with ``mid``, ``uname`` and ``roomid``.

        Returns how many were new.
        """
        added = 0
        for entry in entries:
            added += self.insert_vup(
                int(entry.get("mid") or 0),
                str(entry.get("uname") or ""),
                int(entry.get("roomid") or 0),
            )
        return added

    def close(self) -> None:
        with self._lock:
            self._conn.close()


def order_vups(vups: Iterable[Vup], medals: Iterable[Medal]) -> list[Vup]:
    """Put the streamers a user wears medals for first, highest medal level first.

    The other streamers follow in their given order.
    """
    ranked = sort_medals(medals)
    front = [Vup(m.mid, m.uname) for m in ranked]
    held = {m.mid for m in ranked}
    return front + [v for v in vups if v.mid not in held]