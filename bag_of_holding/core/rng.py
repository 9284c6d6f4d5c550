# bag_of_holding/core/rng.py
"""Random source construction.

Every generator in this package takes its randomness as an argument so that
tests can pin a seed and the web layer can hand each request its own
generator. Nothing here is cryptographic.
"""

from __future__ import annotations

import random
from typing import List, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """The subset of ``random.Random`` the generators rely on."""

    def randint(self, a: int, b: int) -> int:
        """Uniform integer in ``[a, b]``."""
        ...

    def random(self) -> float:
        """Uniform float in ``[0.0, 1.0)``."""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        """Uniformly chosen element of a non-empty sequence."""
        ...

    def choices(
        self,
        population: Sequence[T],
        weights: Optional[Sequence[float]] = None,
        *,
        k: int = 1,
    ) -> List[T]:
        """``k`` elements drawn with replacement, proportional to ``weights``."""
        ...


def rng_from_entropy() -> random.Random:
    """Create a new generator seeded from the operating system."""
    return random.Random()


def seeded_rng(seed: Optional[int]) -> random.Random:
    """Create a deterministic generator (falls back to entropy for ``None``)."""
    if seed is None:
        return rng_from_entropy()
    return random.Random(seed)
