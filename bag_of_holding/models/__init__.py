# bag_of_holding/models/__init__.py
"""
Models package for D&D character generation.

This package provides the building blocks of a character: ability scores,
alignments, deities, languages, names, races and sizes, plus the
character builder that assembles them.
"""

from .base import (
    Ability,
    Attitude,
    Morality,
    Domain,
    LanguageType,
    Language,
    Size,
)

from .abilities import AbilityScoreEntry, AbilityScores

from .alignments import Alignment, AlignmentWeighting

from .deities import (
    Pantheon,
    Deity,
    generate_deity,
    generate_domain,
)

from .languages import Languages

from .names import NameGenerator

from .sizes import HeightAndWeight, HeightAndWeightTable

from .races import (
    Race,
    RaceOption,
    DraconicAncestry,
    Dragonborn,
    DwarfSubrace,
    Dwarf,
    ElfSubrace,
    Elf,
    HalflingSubrace,
    Halfling,
)

from .characters import Character

__all__ = [
    # Base enums
    'Ability',
    'Attitude',
    'Morality',
    'Domain',
    'LanguageType',
    'Language',
    'Size',

    # Abilities
    'AbilityScoreEntry',
    'AbilityScores',

    # Alignments
    'Alignment',
    'AlignmentWeighting',

    # Deities
    'Pantheon',
    'Deity',
    'generate_deity',
    'generate_domain',

    # Languages and names
    'Languages',
    'NameGenerator',

    # Sizes
    'HeightAndWeight',
    'HeightAndWeightTable',

    # Races
    'Race',
    'RaceOption',
    'DraconicAncestry',
    'Dragonborn',
    'DwarfSubrace',
    'Dwarf',
    'ElfSubrace',
    'Elf',
    'HalflingSubrace',
    'Halfling',

    # Character
    'Character',
]
