"""Default rate limit setting and a report of the host's load."""

from __future__ import annotations

import math
import re

import psutil

_COMMAND = re.compile(r"^设置默认限速为每\s*(\d+)\s*(分钟|秒)\s*(\d+)\s*次触发$", re.ASCII)


def pack_limit(interval: int, burst: int) -> int:
    """Pack interval seconds and burst count into one stored number."""
    return (interval & 0xFFFF) | ((burst << 16) & 0xFFFF0000)


def unpack_limit(value: int) -> tuple[int, int]:
    """Return (interval seconds, burst count) from a stored number."""
    return value & 0xFFFF, (value >> 16) & 0xFFFF


def parse_limit_command(text: str) -> tuple[int, int]:
    """Read "设置默认限速为每 m 分钟|秒 n 次触发" as (seconds, burst)."""
    match = _COMMAND.match(text)
    if match is None:
        raise ValueError("not a limit command")
    interval = int(match.group(1))
    if match.group(2) == "分钟":
        interval *= 60
    if interval >= 65536 or interval <= 0:
        raise ValueError("interval too big")
    burst = int(match.group(3))
    if burst >= 65536 or burst <= 0:
        raise ValueError("burst too big")
    return interval, burst


def _round(x: float) -> int:
    return math.floor(x + 0.5) if x >= 0 else -math.floor(-x + 0.5)


def _cpu() -> int:
    try:
        return _round(psutil.cpu_percent(interval=1))
    except (OSError, psutil.Error):
        return -1


def _mem() -> int:
    try:
        return _round(psutil.virtual_memory().percent)
    except (OSError, psutil.Error):
        return -1


def _disks() -> str:
    try:
        parts = psutil.disk_partitions(all=True)
    except (OSError, psutil.Error) as e:
        return str(e)
    lines = []
    for part in parts:
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except (OSError, psutil.Error) as e:
            lines.append(f"\n  - {e}")
            continue
        pc = _round(usage.percent)
        if pc > 0:
            lines.append(f"\n  - {part.mountpoint}({usage.total // 1024 // 1024}M) {pc}%")
    return "".join(lines)


def system_status() -> str:
    """Report CPU, memory and disk use."""
    return f"* CPU占用: {_cpu()}%\n* RAM占用: {_mem()}%\n* 硬盘使用: {_disks()}"