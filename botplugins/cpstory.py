"""Short couple stories with the two leads' names filled in."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CpStory:
    """A story template and the names it was written with."""

    id: int
    gong: str
    shou: str
    story: str

    def render(self, first: str, second: str) -> str:
        """Fill the story with the given names."""
        text = self.story.replace("<攻>", first)
        text = text.replace("<受>", second)
        text = text.replace(self.gong, first)
        return text.replace(self.shou, first)


def parse_pair(args: str) -> tuple[str, str]:
    """Split "name name" into the two names."""
    params = args.split(" ")
    if len(params) < 2:
        raise ValueError("请用空格分开两个人名")
    return params[0], params[1]