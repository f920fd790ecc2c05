"""Random terminal colours for log output."""

from __future__ import annotations

import random

COLORS = ("red", "green", "yellow", "blue", "magenta", "cyan", "white")


def random_color(rng: random.Random | None = None) -> str:
    """Pick one of the log colours at random."""
    if rng is None:
        return random.choice(COLORS)
    return rng.choice(COLORS)