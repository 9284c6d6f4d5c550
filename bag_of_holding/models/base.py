# bag_of_holding/models/base.py
"""Base enumerations for D&D 5e character generation."""

from enum import Enum


class Ability(Enum):
    """Ability scores, in character sheet order."""
    STRENGTH = "STR"
    DEXTERITY = "DEX"
    CONSTITUTION = "CON"
    INTELLIGENCE = "INT"
    WISDOM = "WIS"
    CHARISMA = "CHA"

    def __str__(self) -> str:
        return self.value


class Attitude(Enum):
    """Attitudes toward society and order."""
    CHAOTIC = "Chaotic"
    LAWFUL = "Lawful"
    NEUTRAL = "Neutral"

    def __str__(self) -> str:
        return self.value


class Morality(Enum):
    """View toward good and evil."""
    EVIL = "Evil"
    GOOD = "Good"
    NEUTRAL = "Neutral"

    def __str__(self) -> str:
        return self.value


class Domain(Enum):
    """Aspects of mortal life a deity holds influence over.

    All of a deity's domains together are its portfolio. A cleric picks one
    domain of their deity's portfolio to emphasize.
    """
    ARCANA = "Arcana"
    DEATH = "Death"
    FORGE = "Forge"
    GRAVE = "Grave"
    KNOWLEDGE = "Knowledge"
    LIFE = "Life"
    LIGHT = "Light"
    NATURE = "Nature"
    TEMPEST = "Tempest"
    TRICKERY = "Trickery"
    WAR = "War"

    def __str__(self) -> str:
        return self.value


class LanguageType(Enum):
    """How widespread a language is. Value is its selection affinity."""
    EXOTIC = 0
    STANDARD = 3


class Language(Enum):
    """Languages a character can learn and speak."""
    COMMON = "Common"
    DWARVISH = "Dwarvish"
    ELVISH = "Elvish"
    GIANT = "Giant"
    GNOMISH = "Gnomish"
    GOBLIN = "Goblin"
    HALFLING = "Halfling"
    ORC = "Orc"
    ABYSSAL = "Abyssal"
    CELESTIAL = "Celestial"
    DRACONIC = "Draconic"
    DEEP_SPEECH = "Deep Speech"
    INFERNAL = "Infernal"
    PRIMORDIAL = "Primordial"
    SYLVAN = "Sylvan"
    UNDERCOMMON = "Undercommon"
    THIEVES_CANT = "Thieves' Cant"
    TONGUE_OF_DRUIDS = "Tongue of Druids"

    @property
    def language_type(self) -> LanguageType:
        """Whether this is a standard or exotic language."""
        if self in _STANDARD_LANGUAGES:
            return LanguageType.STANDARD
        return LanguageType.EXOTIC

    def __str__(self) -> str:
        return self.value


_STANDARD_LANGUAGES = frozenset({
    Language.COMMON,
    Language.DWARVISH,
    Language.ELVISH,
    Language.GIANT,
    Language.GNOMISH,
    Language.GOBLIN,
    Language.HALFLING,
    Language.ORC,
})


class Size(Enum):
    """Creature size categories."""
    TINY = "Tiny"
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    HUGE = "Huge"
    GARGANTUAN = "Gargantuan"

    def __str__(self) -> str:
        return self.value
