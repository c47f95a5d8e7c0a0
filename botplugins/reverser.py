"""Turn English text upside down."""

from __future__ import annotations

import re

_WS = "[\t\n\f\r ]"
_TARGET = re.compile(rf"[A-z]{{1}}([A-z]|{_WS})+[A-z]{{1}}")
_COMMAND = re.compile(rf"翻转( )+[A-z]{{1}}([A-z]|{_WS})+[A-z]{{1}}")

CHAR_MAP = {
    "a": "ɐ", "b": "q", "c": "ɔ", "d": "p", "e": "ǝ", "f": "ɟ", "g": "ƃ",
    "h": "ɥ", "i": "ᴉ", "j": "ɾ", "k": "ʞ", "l": "l", "m": "ɯ", "n": "u",
    "o": "o", "p": "d", "q": "b", "r": "ɹ", "s": "s", "t": "ʇ", "u": "n",
    "v": "ʌ", "w": "ʍ", "x": "x", "y": "ʎ", "z": "z",
    "A": "∀", "B": "ᗺ", "C": "Ɔ", "D": "ᗡ", "E": "Ǝ", "F": "Ⅎ", "G": "⅁",
    "H": "H", "I": "I", "J": "ſ", "K": "ʞ", "L": "˥", "M": "W", "N": "N",
    "O": "O", "P": "Ԁ", "Q": "Ò", "R": "ᴚ", "S": "S", "T": "⏊", "U": "∩",
    "V": "Λ", "W": "M", "X": "X", "Y": "⅄", "Z": "Z",
}


def extract_target(text: str) -> str:
    """Return the first English run of a flip command message.

    Raises ValueError when the message holds no flip command.
    """
    if not _COMMAND.search(text):
        raise ValueError("not a flip command")
    return _TARGET.search(text).group(0)


def flip_text(text: str) -> str:
    """Reverse the text and replace each letter with its upside-down form.

    Characters without a mapping become NUL; spaces stay spaces.
    """
    return "".join(" " if ch == " " else CHAR_MAP.get(ch, "\x00") for ch in reversed(text))