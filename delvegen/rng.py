"""Seedable dice roller used by every builder."""

from __future__ import annotations

import random
from typing import Optional


class RandomNumberGenerator:
    """Dice-style random numbers; equal seeds give equal sequences."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._random = random.Random(seed)

    def roll_dice(self, n: int, die_type: int) -> int:
        """Sum of ``n`` rolls of a die numbered 1 to ``die_type``."""
        if die_type < 1:
            raise ValueError(f"cannot roll a die with {die_type} sides")
        return sum(self._random.randint(1, die_type) for _ in range(n))

    def range(self, min_value: int, max_value: int) -> int:
        """A number from ``min_value`` up to but not including ``max_value``."""
        if max_value <= min_value:
            raise ValueError(f"empty range {min_value}..{max_value}")
        return self._random.randrange(min_value, max_value)