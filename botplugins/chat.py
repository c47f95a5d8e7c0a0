"""Small talk: answering the bot's name, pokes and a group air conditioner."""

from __future__ import annotations

import random
import threading
import time
from typing import Any, Callable

DEFAULT_TEMPERATURE = 26


class TokenBucket:
    """``burst`` tokens that refill evenly over ``interval`` seconds."""

    def __init__(self, interval: float, burst: int,
                 clock: Callable[[], float] = time.monotonic) -> None:
        self.interval = interval
        self.burst = burst
        self._clock = clock
        self._tokens = float(burst)
        self._stamp = clock()
        self._lock = threading.Lock()

    def _refill(self) -> None:
        now = self._clock()
        elapsed = now - self._stamp
        if elapsed > 0:
            self._tokens = min(float(self.burst),
                               self._tokens + elapsed * self.burst / self.interval)
        self._stamp = now

    def acquire(self, n: int = 1) -> bool:
        """Take ``n`` tokens if that many are available."""
        with self._lock:
            self._refill()
            if self._tokens >= n:
                self._tokens -= n
                return True
            return False


class PokeLimiter:
    """Per-group limit on answering pokes: 8 tokens every 5 minutes."""

    def __init__(self, interval: float = 300.0, burst: int = 8,
                 clock: Callable[[], float] = time.monotonic) -> None:
        self._interval = interval
        self._burst = burst
        self._clock = clock
        self._buckets: dict[int, TokenBucket] = {}
        self._lock = threading.Lock()

    def _bucket(self, group_id: int) -> TokenBucket:
        with self._lock:
            bucket = self._buckets.get(group_id)
            if bucket is None:
                bucket = TokenBucket(self._interval, self._burst, self._clock)
                self._buckets[group_id] = bucket
            return bucket

    def poke_reply(self, group_id: int, nickname: str) -> str | None:
        """Return the answer to a poke, or None when poked too often."""
        bucket = self._bucket(group_id)
        if bucket.acquire(3):
            return f"请不要戳{nickname} >_<"
        if bucket.acquire(1):
            return f"喂(#`O′) 戳{nickname}干嘛！"
        return None


class AirConditioner:
    """A make-believe air conditioner for each group."""

    def __init__(self) -> None:
        self._temperature: dict[int, int] = {}
        self._on: dict[int, bool] = {}

    def turn_on(self, group_id: int) -> str:
        self._on[group_id] = True
        return "❄️哔~"

    def turn_off(self, group_id: int) -> str:
        self._on[group_id] = False
        self._temperature.pop(group_id, None)
        return "💤哔~"

    def _status(self, group_id: int) -> str:
        head = "❄️风速中" if self._on.get(group_id, False) else "💤"
        return f"{head}\n群温度 {self._temperature[group_id]}℃"

    def set_temperature(self, group_id: int, value: str | int) -> str:
        """Set the temperature if the conditioner is on, then report."""
        self._temperature.setdefault(group_id, DEFAULT_TEMPERATURE)
        if self._on.get(group_id, False):
            try:
                self._temperature[group_id] = int(value)
            except ValueError:
                self._temperature[group_id] = 0
        return self._status(group_id)

    def report(self, group_id: int) -> str:
        self._temperature.setdefault(group_id, DEFAULT_TEMPERATURE)
        return self._status(group_id)


def name_reply(nickname: str, rng: Any = None) -> str:
    """Answer to the bot being called by name."""
    replies = (
        nickname + "在此，有何贵干~",
        "(っ●ω●)っ在~",
        "这里是" + nickname + "(っ●ω●)っ",
        nickname + "不在呢~",
    )
    return replies[(rng or random).randrange(len(replies))]