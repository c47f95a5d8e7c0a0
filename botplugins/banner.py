"""Start-up banner with version information and a notice board."""

from __future__ import annotations

_INFO = (
    "* OneBot + ZeroBot + Python",
    "* Version 1.5.0-beta5 - 2022-07-22 15:39:17 +0800 CST",
)

BANNER = "\n".join(_INFO)


def render_banner(notice: str) -> str:
    """Return the full banner text with the given notice inserted."""
    return "".join(
        (
            "\n======================[ZeroBot-Plugin]======================",
            "\n",
            BANNER,
            "\n",
            "----------------------[ZeroBot-公告栏]----------------------",
            "\n",
            notice,
            "\n",
            "============================================================\n\n",
        )
    )