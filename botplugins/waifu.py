"""Random generated waifu pictures."""

from __future__ import annotations

import random
from typing import Any

_URL = "https://www.thiswaifudoesnotexist.net/example-{}.jpg"


def waifu_url(rng: Any = None) -> str:
    """Return the address of a random picture numbered 1 to 100000."""
    rng = rng or random
    return _URL.format(rng.randrange(100000) + 1)