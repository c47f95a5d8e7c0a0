"""Turn Chinese text into "abstract speech" by swapping syllables for emoji."""

from __future__ import annotations

from typing import Callable


def translate(
    text: str,
    lookup_pinyin: Callable[[str], str],
    lookup_emoji: Callable[[str], str],
) -> str:
    """Replace characters by emoji of the same sound.

    A pair of characters whose joined pronunciation has an emoji is replaced
    first; otherwise a single character is replaced, or kept as it is.
    The lookups return an empty string when they know nothing.
    """
    chars = list(text)
    out: list[str] = []
    i = 0
    while i < len(chars):
        if i < len(chars) - 1:
            pair = lookup_emoji(lookup_pinyin(chars[i]) + lookup_pinyin(chars[i + 1]))
            if pair:
                out.append(pair)
                i += 2
                continue
        single = lookup_emoji(lookup_pinyin(chars[i]))
        out.append(single or chars[i])
        i += 1
    return "".join(out)