# bag_of_holding/models/abilities.py
"""Ability scores and modifiers for characters."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Set

from ..core.dice import Die
from ..core.exceptions import ExhaustedAbilitiesError
from ..core.rng import RandomSource
from ..core.weighted import choose_exp_weighted
from .base import Ability

log = logging.getLogger(__name__)

# No character's total ability score may go above this
SCORE_CAP = 20


def calculate_modifier(score: int) -> int:
    """Lower the score to the closest even number, reduce by 10, and halve."""
    return (score - score % 2 - 10) // 2


def roll_base_score(rng: RandomSource) -> int:
    """Roll 4d6 and keep the three highest."""
    rolls = sorted(Die.D6.roll_multiple(rng, 4), reverse=True)
    return sum(rolls[:3])


@dataclass
class AbilityScoreEntry:
    """A single ability's base roll plus any racial increase."""

    base: int
    racial_increase: int = 0

    def __post_init__(self):
        """Validate score ranges."""
        if not 0 <= self.base <= SCORE_CAP:
            raise ValueError(f"Base score must be between 0 and {SCORE_CAP}, got {self.base}")
        if self.racial_increase < 0:
            raise ValueError(f"Racial increase cannot be negative, got {self.racial_increase}")

    @property
    def total(self) -> int:
        """Base score plus racial increase."""
        return self.base + self.racial_increase

    @property
    def modifier(self) -> int:
        """Modifier derived from the total, between -5 and 5."""
        return calculate_modifier(self.total)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary."""
        return {
            'base': self.base,
            'racial_increase': self.racial_increase,
            'score': self.total,
            'modifier': self.modifier,
        }


@dataclass
class AbilityScores:
    """All six ability scores of a character."""

    _scores: Dict[Ability, AbilityScoreEntry]

    def __post_init__(self):
        """Every ability must have a score."""
        missing = [ability.value for ability in Ability if ability not in self._scores]
        if missing:
            raise ValueError(f"Ability scores missing for {', '.join(missing)}")

    @classmethod
    def generate(cls, rng: RandomSource) -> 'AbilityScores':
        """Roll base scores for every ability (4d6, keep the top 3)."""
        scores = {ability: AbilityScoreEntry(roll_base_score(rng)) for ability in Ability}
        log.debug(
            "Generated ability scores: %s",
            {ability.value: entry.base for ability, entry in scores.items()},
        )
        return cls(scores)

    @staticmethod
    def calculate_modifier(score: int) -> int:
        """Calculate ability modifier from score."""
        return calculate_modifier(score)

    def get_entry(self, ability: Ability) -> AbilityScoreEntry:
        """Get the full score entry for an ability."""
        return self._scores[ability]

    def get_score(self, ability: Ability) -> int:
        """Get total ability score."""
        return self._scores[ability].total

    def get_modifier(self, ability: Ability) -> int:
        """Get ability modifier."""
        return self._scores[ability].modifier

    def apply_racial_increases(self, rng: RandomSource, increases: Sequence[int]) -> List[Ability]:
        """Spread racial ability increases across different abilities.

        Increases are placed one at a time. Each goes to an ability that has
        not received one yet in this call and can take it without passing
        the cap. Abilities where the increase raises the modifier are
        preferred, and among those, abilities with higher modifiers are more
        likely to be picked.

        Args:
            rng: Random source
            increases: Amount of each increase, e.g. ``[2, 1]``

        Returns:
            The ability chosen for each increase, in order

        Raises:
            ExhaustedAbilitiesError: If an increase cannot be placed anywhere
        """
        # Nothing is written until every increase has a target
        chosen: List[Ability] = []
        used: Set[Ability] = set()

        for increase in increases:
            valid = [
                ability for ability in Ability
                if ability not in used and self.get_score(ability) + increase <= SCORE_CAP
            ]
            if not valid:
                raise ExhaustedAbilitiesError(increase, SCORE_CAP)

            # An increase with the same parity as the score bumps the modifier
            optimal = [a for a in valid if self.get_score(a) % 2 == increase % 2]

            ability = choose_exp_weighted(rng, optimal or valid, self.get_modifier)
            used.add(ability)
            chosen.append(ability)

        for ability, increase in zip(chosen, increases):
            self._scores[ability].racial_increase += increase
            log.debug("Racial increase +%d applied to %s", increase, ability.value)

        return chosen

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary keyed by ability abbreviation, in sheet order."""
        return {ability.value: self._scores[ability].to_dict() for ability in Ability}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AbilityScores':
        """Create from dictionary.

        Values may be plain base scores or entries as produced by ``to_dict``.
        """
        scores = {}
        for ability in Ability:
            key = ability.value
            if key not in data:
                continue
            value = data[key]
            if isinstance(value, dict):
                scores[ability] = AbilityScoreEntry(
                    base=value['base'],
                    racial_increase=value.get('racial_increase', 0),
                )
            else:
                scores[ability] = AbilityScoreEntry(base=value)
        return cls(scores)
