"""Pick one of several options for the undecided."""

from __future__ import annotations

import random
from typing import Any

SEPARATOR = "还是"


def split_options(args: str) -> list[str]:
    return args.split(SEPARATOR)


def choose(args: str, nickname: str, rng: Any = None) -> str:
    """Return the reply listing the options and the randomly chosen one."""
    rng = rng or random
    options = split_options(args)
    listing = "\n".join(f"{number}, {option}" for number, option in enumerate(options, 1))
    result = options[rng.randrange(len(options))]
    return f"> {nickname}\n你的选项有:\n{listing}\n你最终会选: {result}"