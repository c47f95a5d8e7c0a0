"""Recognise bilibili links in messages and describe what they point to."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from .bili_cards import article_card_to_msg, live_card_to_msg, video_card_to_msg
from .segments import Segment


class LinkKind(Enum):
    VIDEO = "video"
    DYNAMIC = "dynamic"
    ARTICLE = "article"
    LIVE = "live"


@dataclass(frozen=True)
class Link:
    """A recognised link and the id it carries."""

    kind: LinkKind
    id: str


_SHORT = re.compile(r"((b23|acg).tv|bili2233.cn)/[0-9a-zA-Z]+", re.ASCII)

_PATTERNS: tuple[tuple[LinkKind, re.Pattern[str], Callable[[re.Match[str]], str]], ...] = (
    (
        LinkKind.VIDEO,
        re.compile(r"bilibili.com\\?/video\\?/(?:av(\d+)|([bB][vV][0-9a-zA-Z]+))", re.ASCII),
        lambda m: m.group(1) or m.group(2),
    ),
    (
        LinkKind.DYNAMIC,
        re.compile(r"(t.bilibili.com|m.bilibili.com\\?/dynamic)\\?/(\d+)", re.ASCII),
        lambda m: m.group(2),
    ),
    (
        LinkKind.ARTICLE,
        re.compile(r"bilibili.com\\?/read\\?/(?:cv|mobile\\?/)(\d+)", re.ASCII),
        lambda m: m.group(1),
    ),
    (
        LinkKind.LIVE,
        re.compile(r"live.bilibili.com\\?/(\d+)", re.ASCII),
        lambda m: m.group(1),
    ),
)


def find_link(text: str) -> Link | None:
    """Return the first kind of link found, trying video, dynamic, article, live."""
    for kind, pattern, pick in _PATTERNS:
        match = pattern.search(text)
        if match:
            return Link(kind, pick(match))
    return None


def find_short_link(text: str) -> str | None:
    """Return the https address of a short link in the text, if there is one."""
    match = _SHORT.search(text)
    return "https://" + match.group(0) if match else None


def describe(link: Link, client: Any) -> list[Segment]:
    """Fetch what the link points to and render it as message segments."""
    if link.kind is LinkKind.VIDEO:
        card = client.video_info(link.id)
        member = client.member_card(card.owner.mid)
        return video_card_to_msg(card, member)
    if link.kind is LinkKind.DYNAMIC:
        return client.dynamic_detail(link.id)
    if link.kind is LinkKind.ARTICLE:
        return article_card_to_msg(client.article_info(link.id), link.id)
    if link.kind is LinkKind.LIVE:
        return live_card_to_msg(client.live_room_info(link.id))
    raise ValueError(f"unknown link kind: {link.kind}")