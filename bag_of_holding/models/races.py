# bag_of_holding/models/races.py
"""Playable races.

Races form a closed set. Every race answers the same questions (ability
increases, languages, pantheons, size...) which later generation steps use
to shape the rest of the character.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Tuple, Union

from ..core.rng import RandomSource
from .base import Attitude, Language, Morality, Size
from .deities import Pantheon
from .names import NameGenerator
from .sizes import HeightAndWeight, HeightAndWeightTable

log = logging.getLogger(__name__)

PLAYERS_HANDBOOK = "PHB"


class Race(ABC):
    """Traits every race provides to character generation."""

    name: str = ""
    source: str = PLAYERS_HANDBOOK
    age_range: Tuple[int, int] = (18, 80)
    size: Size = Size.MEDIUM
    deity_required: bool = False

    @property
    @abstractmethod
    def ability_increases(self) -> List[int]:
        """Amounts of each ability score increase, e.g. ``[2, 1]``."""
        raise NotImplementedError

    @property
    @abstractmethod
    def height_and_weight_table(self) -> HeightAndWeightTable:
        """Table used to generate height and weight."""
        raise NotImplementedError

    @property
    @abstractmethod
    def name_generator(self) -> NameGenerator:
        """Name generator to use for this race."""
        raise NotImplementedError

    @property
    def likely_languages(self) -> List[Language]:
        """Languages this race usually learns."""
        return []

    @property
    def additional_languages(self) -> int:
        """How many languages to learn on top of Common."""
        return 1

    @property
    def pantheon_influences(self) -> List[Pantheon]:
        """Pantheons this race tends to worship."""
        return []

    @property
    def attitude_influences(self) -> List[Attitude]:
        """Attitudes this race leans toward."""
        return []

    @property
    def morality_influences(self) -> List[Morality]:
        """Moralities this race leans toward."""
        return []

    def gen_name(self, rng: RandomSource) -> str:
        """Generate a name for this race."""
        return self.name_generator.gen(rng)

    def gen_age(self, rng: RandomSource) -> int:
        """Generate an adult age for this race."""
        low, high = self.age_range
        return rng.randint(low, high)

    def gen_height_and_weight(self, rng: RandomSource) -> HeightAndWeight:
        """Generate height and weight for this race."""
        return self.height_and_weight_table.gen(rng)

    def citation(self) -> str:
        """Race name with its source book, e.g. ``"Hill Dwarf (PHB)"``."""
        return f"{self} ({self.source})"

    def __str__(self) -> str:
        return self.name


class DraconicAncestry(Enum):
    """Dragon types available as dragonborn ancestry."""
    BLACK = "Black"
    BLUE = "Blue"
    BRASS = "Brass"
    BRONZE = "Bronze"
    COPPER = "Copper"
    GOLD = "Gold"
    GREEN = "Green"
    RED = "Red"
    SILVER = "Silver"
    WHITE = "White"

    @property
    def metallic(self) -> bool:
        """Metallic dragons lean good, chromatic dragons lean evil."""
        return self in _METALLIC


_METALLIC = frozenset({
    DraconicAncestry.BRASS,
    DraconicAncestry.BRONZE,
    DraconicAncestry.COPPER,
    DraconicAncestry.GOLD,
    DraconicAncestry.SILVER,
})


@dataclass(frozen=True)
class Dragonborn(Race):
    """Born of dragons, walking proudly through a world that fears them."""

    draconic_ancestry: DraconicAncestry = DraconicAncestry.RED
    age_range = (15, 80)

    @property
    def name(self) -> str:
        return f"{self.draconic_ancestry.value} Dragonborn"

    @property
    def ability_increases(self) -> List[int]:
        return [2, 1]

    @property
    def height_and_weight_table(self) -> HeightAndWeightTable:
        return HeightAndWeightTable.DRAGONBORN

    @property
    def name_generator(self) -> NameGenerator:
        return NameGenerator.DRAGONBORN

    @property
    def likely_languages(self) -> List[Language]:
        return [Language.DRACONIC]

    @property
    def pantheon_influences(self) -> List[Pantheon]:
        return [Pantheon.DRAGON]

    @property
    def morality_influences(self) -> List[Morality]:
        return [Morality.GOOD if self.draconic_ancestry.metallic else Morality.EVIL]


class DwarfSubrace(Enum):
    """Dwarven subraces."""
    HILL = "Hill"
    MOUNTAIN = "Mountain"


@dataclass(frozen=True)
class Dwarf(Race):
    """Bold and hardy, known as skilled warriors, miners and workers of stone and metal."""

    subrace: DwarfSubrace = DwarfSubrace.HILL
    age_range = (50, 350)

    @property
    def name(self) -> str:
        return f"{self.subrace.value} Dwarf"

    @property
    def ability_increases(self) -> List[int]:
        if self.subrace is DwarfSubrace.MOUNTAIN:
            return [2, 2]
        return [2, 1]

    @property
    def height_and_weight_table(self) -> HeightAndWeightTable:
        if self.subrace is DwarfSubrace.MOUNTAIN:
            return HeightAndWeightTable.MOUNTAIN_DWARF
        return HeightAndWeightTable.HILL_DWARF

    @property
    def name_generator(self) -> NameGenerator:
        return NameGenerator.DWARF

    @property
    def likely_languages(self) -> List[Language]:
        return [Language.DWARVISH]

    @property
    def pantheon_influences(self) -> List[Pantheon]:
        return [Pantheon.DWARVEN]

    @property
    def attitude_influences(self) -> List[Attitude]:
        return [Attitude.LAWFUL]

    @property
    def morality_influences(self) -> List[Morality]:
        return [Morality.GOOD]


class ElfSubrace(Enum):
    """Elven subraces."""
    HIGH = "High"
    WOOD = "Wood"


@dataclass(frozen=True)
class Elf(Race):
    """A magical people of otherworldly grace."""

    subrace: ElfSubrace = ElfSubrace.HIGH
    age_range = (100, 750)

    @property
    def name(self) -> str:
        return f"{self.subrace.value} Elf"

    @property
    def ability_increases(self) -> List[int]:
        return [2, 1]

    @property
    def height_and_weight_table(self) -> HeightAndWeightTable:
        if self.subrace is ElfSubrace.WOOD:
            return HeightAndWeightTable.WOOD_ELF
        return HeightAndWeightTable.HIGH_ELF

    @property
    def name_generator(self) -> NameGenerator:
        return NameGenerator.ELF

    @property
    def likely_languages(self) -> List[Language]:
        return [Language.ELVISH]

    @property
    def additional_languages(self) -> int:
        # High elves learn one extra language of their choice
        return 2 if self.subrace is ElfSubrace.HIGH else 1

    @property
    def pantheon_influences(self) -> List[Pantheon]:
        return [Pantheon.ELVEN]

    @property
    def attitude_influences(self) -> List[Attitude]:
        return [Attitude.CHAOTIC]

    @property
    def morality_influences(self) -> List[Morality]:
        return [Morality.GOOD]


class HalflingSubrace(Enum):
    """Halfling subraces."""
    LIGHTFOOT = "Lightfoot"
    STOUT = "Stout"


@dataclass(frozen=True)
class Halfling(Race):
    """Small folk who value the comforts of home."""

    subrace: HalflingSubrace = HalflingSubrace.LIGHTFOOT
    age_range = (20, 150)
    size = Size.SMALL

    @property
    def name(self) -> str:
        return f"{self.subrace.value} Halfling"

    @property
    def ability_increases(self) -> List[int]:
        return [2, 1]

    @property
    def height_and_weight_table(self) -> HeightAndWeightTable:
        return HeightAndWeightTable.HALFLING

    @property
    def name_generator(self) -> NameGenerator:
        return NameGenerator.HALFLING

    @property
    def likely_languages(self) -> List[Language]:
        return [Language.HALFLING]

    @property
    def pantheon_influences(self) -> List[Pantheon]:
        return [Pantheon.HALFLING]

    @property
    def attitude_influences(self) -> List[Attitude]:
        return [Attitude.LAWFUL]

    @property
    def morality_influences(self) -> List[Morality]:
        return [Morality.GOOD]


AnyRace = Union[Dragonborn, Dwarf, Elf, Halfling]


class RaceOption(Enum):
    """Supported races to choose from."""
    DRAGONBORN = "dragonborn"
    DWARF = "dwarf"
    ELF = "elf"
    HALFLING = "halfling"

    def gen(self, rng: RandomSource) -> AnyRace:
        """Generate a random variant of this race."""
        race = _GENERATORS[self](rng)
        log.debug("Generated race %s", race)
        return race

    @classmethod
    def random(cls, rng: RandomSource) -> AnyRace:
        """Generate a random race of any kind."""
        return rng.choice(list(cls)).gen(rng)

    def __str__(self) -> str:
        return self.value


_GENERATORS: Dict[RaceOption, Callable[[RandomSource], AnyRace]] = {
    RaceOption.DRAGONBORN: lambda rng: Dragonborn(rng.choice(list(DraconicAncestry))),
    RaceOption.DWARF: lambda rng: Dwarf(rng.choice(list(DwarfSubrace))),
    RaceOption.ELF: lambda rng: Elf(rng.choice(list(ElfSubrace))),
    RaceOption.HALFLING: lambda rng: Halfling(rng.choice(list(HalflingSubrace))),
}
