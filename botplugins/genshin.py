"""Ten-pull gacha draws from a zipped set of character and weapon pictures."""

from __future__ import annotations

import random
import re
import zipfile
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple, Sequence

_PREFIX_LEN = len("Genshin/")
_NAME = re.compile(r"_(.*)\.png")


def is_five_star_mode(value: int) -> bool:
    """Whether the stored settings select the five-star pool."""
    return value & 1 == 1


def set_mode(value: int, five_stars: bool) -> int:
    """Return the stored settings with the pool mode changed."""
    return value | 1 if five_stars else value & ~1


class Rarity(Enum):
    THREE_STAR_WEAPON = 1
    FOUR_STAR_WEAPON = 2
    FOUR_STAR_CHARACTER = 3
    FIVE_STAR_WEAPON = 4
    FIVE_STAR_CHARACTER = 5


class _Pull(NamedTuple):
    rarity: Rarity
    name: str
    background: str
    star: str
    icon: str


@dataclass
class GachaResult:
    """The pulls of one draw, in display order, and the announcement text."""

    pulls: list[_Pull]
    text: str
    five_star: bool


def reply_text(names: Sequence[str], kind: int, previous: str) -> str:
    """Announce five-star pulls; kind 1 is characters, any other weapons."""
    if kind == 1:
        head = "★五星角色★\n"
    elif kind == 2 and previous:
        head = "\n★五星武器★\n"
    else:
        head = "★五星武器★\n"
    parts = [head]
    for name in names:
        match = _NAME.search(name)
        if match is None:
            raise ValueError(f"no name in {name!r}")
        parts.append(match.group(1) + " * ")
    return "".join(parts)


@dataclass
class GachaPool:
    """Picture names grouped by folder, and the star badges."""

    tree: dict[str, list[str]]
    star3: str | None = None
    star4: str | None = None
    star5: str | None = None
    total: int = field(default=0)

    @classmethod
    def from_zip(cls, path: str) -> "GachaPool":
        tree: dict[str, list[str]] = {}
        stars: dict[str, str] = {}
        with zipfile.ZipFile(path) as archive:
            for info in archive.infolist():
                if info.is_dir():
                    tree[info.filename] = []
                    continue
                name = info.filename[_PREFIX_LEN:]
                i = name.rfind("/")
                if i < 0:
                    tree[name] = [name]
                    continue
                folder = name[:i]
                if folder:
                    tree.setdefault(folder, []).append(name)
                    if folder == "gacha":
                        stars[name[i + 1:]] = name
        return cls(
            tree,
            stars.get("ThreeStar.png"),
            stars.get("FourStar.png"),
            stars.get("FiveStar.png"),
        )

    def _pick(self, folder: str, rng: Any) -> str:
        items = self.tree.get(folder, [])
        if not items:
            raise LookupError(f"no pictures in {folder}")
        return items[rng.randrange(len(items))]

    def _single(self, name: str) -> str:
        items = self.tree.get(name)
        if not items:
            raise LookupError(f"missing {name}")
        return items[0]

    def _icon(self, name: str) -> str:
        start = name.rfind("/") + 1
        end = name.find("_")
        if end < start:
            raise ValueError(f"no element in {name!r}")
        return self._single(name[start:end] + ".png")

    def draw(self, count: int = 10, five_star_mode: bool = False, rng: Any = None) -> GachaResult:
        """Draw ``count`` pictures; every ninth draw starts with a sure five-star."""
        rng = rng or random
        fives: list[str] = []
        five_arms: list[str] = []
        fours: list[str] = []
        four_arms: list[str] = []
        three_arms: list[str] = []

        def five_either() -> None:
            if rng.randrange(2) == 0:
                fives.append(self._pick("five", rng))
            else:
                five_arms.append(self._pick("five2", rng))

        if self.total % 9 == 0:
            five_either()
            count -= 1

        if five_star_mode:
            for _ in range(count):
                five_either()
        else:
            for _ in range(count):
                a = rng.randrange(1000)
                if a <= 800:
                    three_arms.append(self._pick("Three", rng))
                elif a <= 885:
                    fours.append(self._pick("four", rng))
                elif a <= 970:
                    four_arms.append(self._pick("four2", rng))
                elif a <= 985:
                    fives.append(self._pick("five", rng))
                else:
                    five_arms.append(self._pick("five2", rng))
            if not fours and not four_arms and three_arms:
                three_arms.pop()
                if rng.randrange(2) == 0:
                    fours.append(self._pick("four", rng))
                else:
                    four_arms.append(self._pick("four2", rng))
            self.total += 1

        five_bg = self._single("five_bg.jpg")
        four_bg = self._single("four_bg.jpg")
        three_bg = self._single("three_bg.jpg")
        groups = (
            (Rarity.FIVE_STAR_CHARACTER, fives, self.star5, five_bg),
            (Rarity.FOUR_STAR_CHARACTER, fours, self.star4, four_bg),
            (Rarity.FIVE_STAR_WEAPON, five_arms, self.star5, five_bg),
            (Rarity.FOUR_STAR_WEAPON, four_arms, self.star4, four_bg),
            (Rarity.THREE_STAR_WEAPON, three_arms, self.star3, three_bg),
        )
        pulls = [
            _Pull(rarity, name, bg, star or "", self._icon(name))
            for rarity, names, star, bg in groups
            for name in names
        ]

        text = ""
        if fives:
            text += reply_text(fives, 1, text)
        if five_arms:
            text += reply_text(five_arms, 2, text)
        return GachaResult(pulls, text, bool(fives or five_arms))