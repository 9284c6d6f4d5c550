# bag_of_holding/core/dice.py
"""Dice rolling.

Supports d4, d6, d8, d10, d12, d20 and d100, either one die at a time, as a
fixed expression such as ``2d8``, or as a pool of mixed dice.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping

from .rng import RandomSource

log = logging.getLogger(__name__)


def roll(rng: RandomSource, sides: int) -> int:
    """Roll a single die with the given number of sides."""
    return rng.randint(1, sides)


def roll_multiple(rng: RandomSource, sides: int, count: int) -> List[int]:
    """Roll ``count`` dice with the given number of sides."""
    return [roll(rng, sides) for _ in range(count)]


class Die(Enum):
    """Available dice types for rolling."""
    D4 = "d4"
    D6 = "d6"
    D8 = "d8"
    D10 = "d10"
    D12 = "d12"
    D20 = "d20"
    D100 = "d100"

    @property
    def sides(self) -> int:
        """Number of sides for this die."""
        return int(self.value[1:])

    def roll(self, rng: RandomSource) -> int:
        """Roll the die and return the result."""
        return roll(rng, self.sides)

    def roll_multiple(self, rng: RandomSource, count: int) -> List[int]:
        """Roll a number of this die and return the results."""
        return roll_multiple(rng, self.sides, count)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Roll:
    """A dice expression, e.g. ``2d8``."""

    amount: int
    die: Die

    def gen(self, rng: RandomSource) -> List[int]:
        """Roll every die in the expression."""
        return self.die.roll_multiple(rng, self.amount)

    @property
    def min(self) -> int:
        """Smallest possible total."""
        return self.amount

    @property
    def max(self) -> int:
        """Largest possible total."""
        return self.amount * self.die.sides

    def __str__(self) -> str:
        return f"{self.amount}{self.die.value}"


def roll_pool(rng: RandomSource, pool: Mapping[Die, int]) -> Dict[Die, List[int]]:
    """Roll a set of mixed dice together.

    Args:
        rng: Random source
        pool: How many of each die to roll

    Returns:
        Results for each requested die, in the order requested
    """
    results = {die: die.roll_multiple(rng, count) for die, count in pool.items()}
    log.debug("roll_pool: %s", {str(d): r for d, r in results.items()})
    return results
