"""Drift bottles: messages thrown into a sea of channels and picked up at random."""

from __future__ import annotations

import re
import sqlite3
import threading
from dataclasses import dataclass
from typing import Iterable

GLOBAL_CHANNEL = "global"

_POLY_ISO = 0xD800000000000000
_MASK = 0xFFFFFFFFFFFFFFFF
_INT64_MAX = 2**63 - 1


def _make_table(poly: int) -> list[int]:
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            crc = (crc >> 1) ^ poly if crc & 1 else crc >> 1
        table.append(crc)
    return table


_TABLE = _make_table(_POLY_ISO)


def crc64_iso(data: Iterable[int]) -> int:
    """CRC-64 with the ISO polynomial, as an unsigned integer."""
    crc = _MASK
    for byte in data:
        crc = _TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ _MASK


@dataclass
class Bottle:
    """A message in a bottle; ``grp`` 0 may be picked up anywhere."""

    id: int
    qq: int
    grp: int
    name: str
    msg: str

    @classmethod
    def create(cls, qq: int, grp: int, name: str, msg: str) -> "Bottle":
        digest = crc64_iso(f"{qq}_{grp}_{name}_{msg}".encode("utf-8"))
        if digest > _INT64_MAX:
            digest -= 2**64
        return cls(digest, qq, grp, name, msg)


def _quote(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


class Sea:
    """SQLite storage with one table per channel."""

    def __init__(self, path: str = ":memory:") -> None:
        self._conn = sqlite3.connect(path, check_same_thread=False)
        self._lock = threading.RLock()
        self.create_channel(GLOBAL_CHANNEL)

    def __enter__(self) -> "Sea":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _run(self, channel: str, sql: str, params: tuple = ()) -> list[tuple]:
        with self._lock:
            try:
                with self._conn:
                    return self._conn.execute(sql, params).fetchall()
            except sqlite3.OperationalError as e:
                if "no such table" in str(e):
                    raise LookupError(f"no such channel: {channel}") from e
                raise

    def create_channel(self, channel: str) -> None:
        channel = channel.rstrip(" ")
        if not channel:
            raise ValueError("频道名为空!")
        self._run(
            channel,
            f"CREATE TABLE IF NOT EXISTS {_quote(channel)} ("
            "id INTEGER PRIMARY KEY NOT NULL, qq INTEGER NOT NULL, "
            "grp INTEGER NOT NULL, name TEXT NOT NULL, msg TEXT NOT NULL)",
        )

    def throw(self, bottle: Bottle, channel: str = GLOBAL_CHANNEL) -> None:
        self._run(
            channel,
            f"REPLACE INTO {_quote(channel)} (id, qq, grp, name, msg) VALUES (?, ?, ?, ?, ?)",
            (bottle.id, bottle.qq, bottle.grp, bottle.name, bottle.msg),
        )

    def fetch(self, channel: str, grp: int) -> Bottle:
        """Pick a random bottle open to everyone or meant for ``grp``."""
        rows = self._run(
            channel,
            f"SELECT id, qq, grp, name, msg FROM {_quote(channel)} "
            "WHERE grp=0 OR grp=? ORDER BY RANDOM() LIMIT 1",
            (grp,),
        )
        if not rows:
            raise LookupError(f"no bottle in channel {channel}")
        return Bottle(*rows[0])

    def destroy(self, bottle: Bottle, channel: str = GLOBAL_CHANNEL) -> None:
        self._run(channel, f"DELETE FROM {_quote(channel)} WHERE id=?", (bottle.id,))

    def count(self, channel: str = GLOBAL_CHANNEL) -> int:
        return self._run(channel, f"SELECT COUNT(*) FROM {_quote(channel)}")[0][0]

    def close(self) -> None:
        with self._lock:
            self._conn.close()


_THROW = re.compile(r"^(在群\d+)?丢漂流瓶(到频道\w+)?\s+(.*)\Z", re.ASCII)
_PICK = re.compile(r"^(从频道\w+)?捡漂流瓶\Z", re.ASCII)


def parse_throw(text: str) -> tuple[int | None, str, str]:
    """Parse a throw command into (group or None, channel, message)."""
    m = _THROW.match(text)
    if m is None:
        raise ValueError("not a throw command")
    grp = None
    if m.group(1):
        grp = int(m.group(1)[2:])
        if grp > _INT64_MAX:
            raise ValueError("群号非法!")
    channel = m.group(2)[3:] if m.group(2) else GLOBAL_CHANNEL
    msg = m.group(3)
    if not msg:
        raise ValueError("消息为空!")
    return grp, channel, msg


def parse_pick(text: str) -> str:
    """Return the channel named by a pick command."""
    m = _PICK.match(text)
    if m is None:
        raise ValueError("not a pick command")
    return m.group(1)[3:] if m.group(1) else GLOBAL_CHANNEL