# bag_of_holding/models/alignments.py
"""Alignment generation.

An alignment pairs an attitude toward order (lawful, chaotic, neutral) with a
morality (good, evil, neutral). Each axis is drawn separately, weighted by
influences from choices made elsewhere on the character sheet.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple, TypeVar

from ..core.rng import RandomSource
from ..core.weighted import choose_exp_weighted
from .base import Attitude, Morality

log = logging.getLogger(__name__)

Axis = TypeVar("Axis", Attitude, Morality)


class AlignmentWeighting(Enum):
    """How an axis value scores against a list of influences."""
    OCCURRENCE = "occurrence"
    COMPATIBILITY = "compatibility"


# Each value has 4 points to spread across the three possible influences
_ATTITUDE_COMPATIBILITY: Dict[Tuple[Attitude, Attitude], int] = {
    (Attitude.CHAOTIC, Attitude.CHAOTIC): 3,
    (Attitude.CHAOTIC, Attitude.NEUTRAL): 1,
    (Attitude.CHAOTIC, Attitude.LAWFUL): 0,
    (Attitude.LAWFUL, Attitude.CHAOTIC): 0,
    (Attitude.LAWFUL, Attitude.NEUTRAL): 1,
    (Attitude.LAWFUL, Attitude.LAWFUL): 3,
    (Attitude.NEUTRAL, Attitude.CHAOTIC): 1,
    (Attitude.NEUTRAL, Attitude.NEUTRAL): 2,
    (Attitude.NEUTRAL, Attitude.LAWFUL): 1,
}

_MORALITY_COMPATIBILITY: Dict[Tuple[Morality, Morality], int] = {
    (Morality.EVIL, Morality.EVIL): 3,
    (Morality.EVIL, Morality.NEUTRAL): 1,
    (Morality.EVIL, Morality.GOOD): 0,
    (Morality.GOOD, Morality.EVIL): 0,
    (Morality.GOOD, Morality.NEUTRAL): 1,
    (Morality.GOOD, Morality.GOOD): 3,
    (Morality.NEUTRAL, Morality.EVIL): 1,
    (Morality.NEUTRAL, Morality.NEUTRAL): 2,
    (Morality.NEUTRAL, Morality.GOOD): 1,
}


def axis_score(
    value: Axis,
    influences: Sequence[Axis],
    weighting: AlignmentWeighting = AlignmentWeighting.OCCURRENCE,
) -> int:
    """Affinity of one attitude or morality for a list of influences."""
    if weighting is AlignmentWeighting.OCCURRENCE:
        return sum(1 for influence in influences if influence == value)

    table: Dict = _ATTITUDE_COMPATIBILITY if isinstance(value, Attitude) else _MORALITY_COMPATIBILITY
    return sum(table[(value, influence)] for influence in influences)


@dataclass(frozen=True)
class Alignment:
    """A creature's moral and social stance."""

    attitude: Attitude
    morality: Morality

    @classmethod
    def generate(
        cls,
        rng: RandomSource,
        attitude_influences: Sequence[Attitude] = (),
        morality_influences: Sequence[Morality] = (),
        weighting: AlignmentWeighting = AlignmentWeighting.OCCURRENCE,
    ) -> 'Alignment':
        """Generate an alignment, weighted by influences from other choices.

        Args:
            rng: Random source
            attitude_influences: Attitudes suggested by earlier choices
            morality_influences: Moralities suggested by earlier choices
            weighting: Scoring scheme for each axis

        Returns:
            The generated alignment
        """
        attitude = choose_exp_weighted(
            rng, list(Attitude), lambda a: axis_score(a, attitude_influences, weighting)
        )
        morality = choose_exp_weighted(
            rng, list(Morality), lambda m: axis_score(m, morality_influences, weighting)
        )
        alignment = cls(attitude, morality)
        log.debug("Generated alignment %s", alignment)
        return alignment

    def weight(
        self,
        attitude_influences: Sequence[Attitude],
        morality_influences: Sequence[Morality],
        weighting: AlignmentWeighting = AlignmentWeighting.OCCURRENCE,
    ) -> int:
        """Affinity of this alignment for a set of influences.

        Useful for comparing things like deities without making a draw.
        """
        return (
            axis_score(self.attitude, attitude_influences, weighting)
            + axis_score(self.morality, morality_influences, weighting)
        )

    def attitude_influences(self) -> List[Attitude]:
        """Attitudes this alignment pushes a character toward."""
        return [self.attitude]

    def morality_influences(self) -> List[Morality]:
        """Moralities this alignment pushes a character toward."""
        return [self.morality]

    @classmethod
    def all(cls) -> List['Alignment']:
        """All nine alignments."""
        return [cls(attitude, morality) for attitude in Attitude for morality in Morality]

    @classmethod
    def from_string(cls, text: str) -> 'Alignment':
        """Parse a display string such as ``"Chaotic Good"`` or ``"Neutral"``."""
        parts = text.split()
        if len(parts) == 1 and parts[0] == Attitude.NEUTRAL.value:
            return cls(Attitude.NEUTRAL, Morality.NEUTRAL)
        if len(parts) != 2:
            raise ValueError(f"Not an alignment: {text!r}")
        return cls(Attitude(parts[0]), Morality(parts[1]))

    def __str__(self) -> str:
        if self.attitude is Attitude.NEUTRAL and self.morality is Morality.NEUTRAL:
            return "Neutral"
        return f"{self.attitude.value} {self.morality.value}"

