# bag_of_holding/core/weighted.py
"""Exponentially weighted random choice.

Affinity scores are small integers (how many influences a candidate matches).
A candidate's weight is ``e ** (score - lowest_score)``, so the weakest option
always keeps a weight of 1 and stays reachable while every extra point of
affinity makes an option roughly 2.7 times more likely.
"""

from __future__ import annotations

import math
from typing import Callable, List, Sequence, TypeVar

from .exceptions import EmptyCandidatesError
from .rng import RandomSource

T = TypeVar("T")

# Keeps each weight, and the sum of many weights, a finite float
MAX_EXPONENT = 600.0


def exp_weight(score: float) -> float:
    """Weight for a score that has already been shifted to be non-negative."""
    return math.exp(min(score, MAX_EXPONENT))


def exp_weights(scores: Sequence[float]) -> List[float]:
    """Exponential weights for raw scores, normalized by the lowest score."""
    if not scores:
        return []
    lowest = min(scores)
    return [exp_weight(score - lowest) for score in scores]


def choose_weighted(rng: RandomSource, candidates: Sequence[T], weights: Sequence[float]) -> T:
    """Pick one candidate with probability proportional to its weight.

    Args:
        rng: Random source
        candidates: Items to choose from
        weights: Non-negative weight per candidate, at least one positive

    Returns:
        The chosen candidate

    Raises:
        EmptyCandidatesError: If there are no candidates
        ValueError: If the weights don't fit the candidates or none is positive
    """
    if not candidates:
        raise EmptyCandidatesError()
    if len(weights) != len(candidates):
        raise ValueError(
            f"Got {len(weights)} weights for {len(candidates)} candidates"
        )

    if any(weight < 0 for weight in weights):
        raise ValueError("Weights cannot be negative")
    if not any(weight > 0 for weight in weights):
        raise ValueError("At least one weight must be positive")

    return rng.choices(candidates, weights=weights)[0]


def choose_exp_weighted(
    rng: RandomSource,
    candidates: Sequence[T],
    score: Callable[[T], float],
) -> T:
    """Pick one candidate, exponentially weighted by its affinity score."""
    if not candidates:
        raise EmptyCandidatesError()
    return choose_weighted(rng, candidates, exp_weights([score(c) for c in candidates]))


def choose_multiple_exp_weighted(
    rng: RandomSource,
    candidates: Sequence[T],
    amount: int,
    score: Callable[[T], float],
) -> List[T]:
    """Pick ``amount`` distinct candidates without replacement.

    Each draw uses the same weighting law over whatever is left, so the
    result is an unordered selection.

    Raises:
        EmptyCandidatesError: If ``amount`` exceeds the number of candidates
    """
    if amount > len(candidates):
        raise EmptyCandidatesError(amount, len(candidates))

    remaining = list(candidates)
    weights = exp_weights([score(c) for c in remaining])
    chosen: List[T] = []
    for _ in range(amount):
        index = choose_weighted(rng, range(len(remaining)), weights)
        chosen.append(remaining.pop(index))
        weights.pop(index)
    return chosen
