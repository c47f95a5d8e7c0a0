"""Search link generation."""

from __future__ import annotations

from urllib.parse import quote_plus

SEARCH_PREFIX = "https://buhuibaidu.me/?s="


def search_link(text: str) -> str | None:
    """Return a search link for the text, or None when the text is empty."""
    if not text:
        return None
    return SEARCH_PREFIX + quote_plus(text)