"""Message segments that plugins send back to the chat."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _go_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def _join(args: tuple[Any, ...]) -> str:
    """Join values, adding a space between two neighbours that are both non-strings."""
    parts: list[str] = []
    previous_is_str = True
    for index, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if index and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(_go_str(arg))
        previous_is_str = is_str
    return "".join(parts)


@dataclass
class Segment:
    """One element of an outgoing chat message."""

    type: str
    data: dict[str, str] = field(default_factory=dict)

    @classmethod
    def text(cls, *args: Any) -> "Segment":
        return cls("text", {"text": _join(args)})

    @classmethod
    def image(cls, url: str) -> "Segment":
        return cls("image", {"file": url})

    @classmethod
    def record(cls, url: str) -> "Segment":
        return cls("record", {"file": url})

    @classmethod
    def reply(cls, message_id: int | str) -> "Segment":
        return cls("reply", {"id": str(message_id)})

    @classmethod
    def at(cls, user_id: int | str) -> "Segment":
        return cls("at", {"qq": str(user_id)})