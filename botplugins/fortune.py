"""Daily fortune slips: background themes and the layout of the slip text."""

from __future__ import annotations

from typing import NamedTuple

THEMES = (
    "车万", "DC4", "爱因斯坦", "星空列车", "樱云之恋", "富婆妹", "李清歌", "公主连结", "原神",
    "明日方舟", "碧蓝航线", "碧蓝幻想", "战双", "阴阳师", "赛马娘", "东方归言录", "奇异恩典",
    "夏日口袋", "ASoul",
)
DEFAULT_THEME = THEMES[0]

_INDEX = {name: i for i, name in enumerate(THEMES)}

_COLUMN = 9
_PADDING = 10
_X_BASE = 115
_Y_BASE = 320.0


class Glyph(NamedTuple):
    char: str
    x: float
    y: float


def offset(total: int, now: int, distance: float) -> float:
    """Offset of the ``now``-th of ``total`` items centred around zero."""
    if total % 2 == 0:
        return (now - total // 2 - 1) * distance
    return (now - total // 2 - 1.5) * distance


def rows(total: int, div: int) -> int:
    """Number of groups of ``div`` needed to hold ``total`` items."""
    return -(-total // div)


def glyph_positions(text: str, glyph_width: float, glyph_height: float) -> list[Glyph]:
    """Lay the slip text out in vertical columns read right to left.

    ``glyph_width`` and ``glyph_height`` are the measured size of one
    character; a padding of 10 is added to both.
    """
    tw = glyph_width + _PADDING
    th = glyph_height + _PADDING
    chars = list(text)
    n = len(chars)
    xsum = rows(n, _COLUMN)
    placed: list[Glyph] = []
    if xsum == 2:
        div = rows(n, 2)
        for i, ch in enumerate(chars):
            xnow = rows(i + 1, div)
            ysum = min(n - (xnow - 1) * div, div)
            ynow = i % div + 1
            x = -offset(xsum, xnow, tw) + _X_BASE
            if xnow == 1:
                y = offset(_COLUMN, ynow, th) + _Y_BASE
            else:
                y = offset(_COLUMN, ynow + (_COLUMN - ysum), th) + _Y_BASE
            placed.append(Glyph(ch, x, y))
        return placed
    for i, ch in enumerate(chars):
        xnow = rows(i + 1, _COLUMN)
        ysum = min(n - (xnow - 1) * _COLUMN, _COLUMN)
        ynow = i % _COLUMN + 1
        placed.append(Glyph(
            ch,
            -offset(xsum, xnow, tw) + _X_BASE,
            offset(ysum, ynow, th) + _Y_BASE,
        ))
    return placed


def theme_for(value: int) -> str:
    """Theme named by the low byte of a stored setting, or the default."""
    v = value & 0xFF
    return THEMES[v] if v < len(THEMES) else DEFAULT_THEME


def theme_index(name: str) -> int:
    """Index of a theme by name."""
    try:
        return _INDEX[name]
    except KeyError:
        raise LookupError("没有这个底图哦～") from None