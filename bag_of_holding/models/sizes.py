# bag_of_holding/models/sizes.py
"""Height and weight generation for player characters."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, NamedTuple, Tuple, Union

from ..core.dice import Die, Roll
from ..core.rng import RandomSource

log = logging.getLogger(__name__)


def in_inches(feet: int, inches: int) -> int:
    """Convert feet + inches to just inches."""
    return feet * 12 + inches


@dataclass(frozen=True)
class HeightAndWeight:
    """Generated height (inches) and weight (pounds) of a creature."""

    height: int
    weight: int

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary."""
        return {'height': self.height, 'weight': self.weight}


class _TableRow(NamedTuple):
    base_height: int
    height_modifier: Roll
    base_weight: int
    # Fixed multiplier or a roll
    weight_modifier: Union[int, Roll]


class HeightAndWeightTable(Enum):
    """Random height and weight tables, one per race variant."""
    DRAGONBORN = "dragonborn"
    HILL_DWARF = "hill-dwarf"
    MOUNTAIN_DWARF = "mountain-dwarf"
    HIGH_ELF = "high-elf"
    WOOD_ELF = "wood-elf"
    HALFLING = "halfling"

    @property
    def _row(self) -> _TableRow:
        return _TABLES[self]

    @property
    def base_height(self) -> int:
        """Base height in inches."""
        return self._row.base_height

    @property
    def height_modifier(self) -> Roll:
        """Roll added to the base height."""
        return self._row.height_modifier

    @property
    def base_weight(self) -> int:
        """Base weight in pounds."""
        return self._row.base_weight

    @property
    def weight_modifier(self) -> Union[int, Roll]:
        """Multiplier applied to the height modifier to get extra weight."""
        return self._row.weight_modifier

    def weight_modifier_range(self) -> Tuple[int, int]:
        """Smallest and largest possible weight multiplier."""
        modifier = self.weight_modifier
        if isinstance(modifier, Roll):
            return modifier.min, modifier.max
        return modifier, modifier

    def gen(self, rng: RandomSource) -> HeightAndWeight:
        """Generate a height and weight from this table."""
        height_mod = sum(self.height_modifier.gen(rng))

        modifier = self.weight_modifier
        weight_mod = sum(modifier.gen(rng)) if isinstance(modifier, Roll) else modifier

        result = HeightAndWeight(
            height=self.base_height + height_mod,
            weight=self.base_weight + height_mod * weight_mod,
        )
        log.debug("Generated %s height and weight: %s", self.value, result)
        return result

    def __str__(self) -> str:
        return self.value


_TABLES: Dict[HeightAndWeightTable, _TableRow] = {
    HeightAndWeightTable.DRAGONBORN: _TableRow(in_inches(5, 6), Roll(2, Die.D8), 175, Roll(2, Die.D6)),
    HeightAndWeightTable.HILL_DWARF: _TableRow(in_inches(3, 8), Roll(2, Die.D4), 115, Roll(2, Die.D6)),
    HeightAndWeightTable.MOUNTAIN_DWARF: _TableRow(in_inches(4, 0), Roll(2, Die.D4), 130, Roll(2, Die.D6)),
    HeightAndWeightTable.HIGH_ELF: _TableRow(in_inches(4, 6), Roll(2, Die.D10), 90, Roll(1, Die.D4)),
    HeightAndWeightTable.WOOD_ELF: _TableRow(in_inches(4, 6), Roll(2, Die.D10), 100, Roll(1, Die.D4)),
    HeightAndWeightTable.HALFLING: _TableRow(in_inches(2, 7), Roll(2, Die.D4), 35, 1),
}
