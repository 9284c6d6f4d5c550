# bag_of_holding/models/characters.py
"""Character assembly.

Generation steps depend on each other: racial increases need ability
scores, and most later steps read hints from the race. Steps that run
before their prerequisites raise a ``CharacterBuildError``.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.exceptions import MissingAbilityScores, MissingRace
from ..core.rng import RandomSource
from .abilities import AbilityScores
from .alignments import Alignment, AlignmentWeighting
from .base import Attitude, Morality
from .deities import Deity, generate_deity
from .languages import Languages
from .races import AnyRace, RaceOption
from .sizes import HeightAndWeight

log = logging.getLogger(__name__)


@dataclass
class Character:
    """A character under construction, and eventually its finished sheet."""

    ability_scores: Optional[AbilityScores] = None
    race: Optional[AnyRace] = None
    name: str = ""
    age: Optional[int] = None
    height_and_weight: Optional[HeightAndWeight] = None
    languages: Languages = field(default_factory=Languages)
    deity: Optional[Deity] = None
    alignment: Optional[Alignment] = None
    weighting: AlignmentWeighting = AlignmentWeighting.OCCURRENCE

    @classmethod
    def generate(cls, rng: RandomSource) -> 'Character':
        """Run every generation step in dependency order."""
        character = cls()
        character.gen_ability_scores(rng)
        character.gen_race(rng)
        character.gen_name(rng)
        character.gen_age(rng)
        character.gen_height_and_weight(rng)
        character.gen_languages(rng)
        character.gen_deity(rng)
        character.gen_alignment(rng)
        log.info("Generated character %r (%s)", character.name, character.race)
        return character

    def _require_ability_scores(self) -> AbilityScores:
        if self.ability_scores is None:
            raise MissingAbilityScores()
        return self.ability_scores

    def _require_race(self) -> AnyRace:
        if self.race is None:
            raise MissingRace()
        return self.race

    def gen_ability_scores(self, rng: RandomSource) -> 'Character':
        self.ability_scores = AbilityScores.generate(rng)
        return self

    def gen_race(self, rng: RandomSource, race: Optional[AnyRace] = None) -> 'Character':
        """Pick a race (random unless given) and apply its ability increases.

        Raises:
            MissingAbilityScores: If ability scores are not generated yet
        """
        scores = self._require_ability_scores()
        race = race if race is not None else RaceOption.random(rng)
        scores.apply_racial_increases(rng, race.ability_increases)
        self.race = race
        return self

    def gen_name(self, rng: RandomSource) -> 'Character':
        self.name = self._require_race().gen_name(rng)
        return self

    def gen_age(self, rng: RandomSource) -> 'Character':
        self.age = self._require_race().gen_age(rng)
        return self

    def gen_height_and_weight(self, rng: RandomSource) -> 'Character':
        self.height_and_weight = self._require_race().gen_height_and_weight(rng)
        return self

    def gen_languages(self, rng: RandomSource) -> 'Character':
        race = self._require_race()
        self.languages.choose_multiple(rng, race.additional_languages, race.likely_languages)
        return self

    def gen_deity(self, rng: RandomSource) -> 'Character':
        """Choose a deity favored by the race's pantheons and alignment leanings."""
        race = self._require_race()
        self.deity = generate_deity(
            rng,
            pantheon_influences=race.pantheon_influences,
            attitude_influences=race.attitude_influences,
            morality_influences=race.morality_influences,
            required=race.deity_required,
            weighting=self.weighting,
        )
        return self

    def attitude_influences(self) -> List[Attitude]:
        """Attitudes suggested by the race and deity chosen so far."""
        influences: List[Attitude] = []
        if self.race is not None:
            influences.extend(self.race.attitude_influences)
        if self.deity is not None:
            influences.extend(self.deity.alignment.attitude_influences())
        return influences

    def morality_influences(self) -> List[Morality]:
        """Moralities suggested by the race and deity chosen so far."""
        influences: List[Morality] = []
        if self.race is not None:
            influences.extend(self.race.morality_influences)
        if self.deity is not None:
            influences.extend(self.deity.alignment.morality_influences())
        return influences

    def gen_alignment(self, rng: RandomSource) -> 'Character':
        """Generate alignment last so race and deity can sway it."""
        self.alignment = Alignment.generate(
            rng,
            self.attitude_influences(),
            self.morality_influences(),
            self.weighting,
        )
        return self

    def to_sheet(self) -> Dict[str, Any]:
        """Character sheet as JSON-ready data."""
        height_and_weight = self.height_and_weight
        return {
            'ability_scores': self.ability_scores.to_dict() if self.ability_scores else None,
            'age': self.age,
            'alignment': str(self.alignment) if self.alignment else None,
            'deity': self.deity.to_dict() if self.deity else None,
            'height': height_and_weight.height if height_and_weight else None,
            'weight': height_and_weight.weight if height_and_weight else None,
            'languages': sorted(self.languages.to_list()),
            'name': self.name,
            'race': self.race.citation() if self.race else None,
            'size': str(self.race.size) if self.race else None,
        }
