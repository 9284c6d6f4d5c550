# bag_of_holding/models/deities.py
"""Deities, pantheons and domains.

Each world in the D&D multiverse has its own pantheons of deities. The
rosters are static reference data loaded once from ``data/deities.json``;
generation only ever selects from them.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..core.exceptions import EmptyCandidatesError
from ..core.rng import RandomSource
from ..core.weighted import choose_exp_weighted, choose_weighted, exp_weights
from .alignments import Alignment, AlignmentWeighting
from .base import Attitude, Domain, Morality

log = logging.getLogger(__name__)

DATA_PACKAGE = "bag_of_holding.data"
DEITIES_FILE = "deities.json"


class Pantheon(Enum):
    """Named groups of deities revered by a culture or creature type."""
    BUGBEAR = "Bugbear"
    DRAGON = "Dragon"
    DRAGONLANCE = "Dragonlance"
    DROW = "Drow"
    DUERGAR = "Duergar"
    DWARVEN = "Dwarven"
    ELVEN = "Elven"
    FORGOTTEN_REALMS = "Forgotten Realms"
    GIANT = "Giant"
    GOBLIN = "Goblin"
    HALFLING = "Halfling"
    KOBOLD = "Kobold"
    LIZARDFOLK = "Lizardfolk"
    ORC = "Orc"

    def deities(self) -> Tuple['Deity', ...]:
        """Deities that are part of this pantheon."""
        return load_rosters()[self]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Deity:
    """A deity a character could favor."""

    name: str
    alignment: Alignment
    domains: Tuple[Domain, ...]
    pantheon: Pantheon
    symbols: Tuple[str, ...] = ()
    titles: Tuple[str, ...] = ()

    def weight(
        self,
        attitude_influences: Sequence[Attitude],
        morality_influences: Sequence[Morality],
        weighting: AlignmentWeighting = AlignmentWeighting.OCCURRENCE,
    ) -> int:
        """How well this deity's alignment matches the influences."""
        return self.alignment.weight(attitude_influences, morality_influences, weighting)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'name': self.name,
            'alignment': str(self.alignment),
            'domains': [domain.value for domain in self.domains],
            'pantheon': self.pantheon.value,
            'symbols': list(self.symbols),
            'titles': list(self.titles),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Deity':
        """Create from dictionary."""
        return cls(
            name=data['name'],
            alignment=Alignment.from_string(data['alignment']),
            domains=tuple(Domain(d) for d in data.get('domains', [])),
            pantheon=Pantheon(data['pantheon']),
            symbols=tuple(data.get('symbols', [])),
            titles=tuple(data.get('titles', [])),
        )


@lru_cache(maxsize=None)
def load_rosters() -> Dict[Pantheon, Tuple[Deity, ...]]:
    """Load every pantheon's deities from package data.

    Raises:
        KeyError: If a pantheon has no roster in the data file
    """
    raw = resources.files(DATA_PACKAGE).joinpath(DEITIES_FILE).read_text(encoding="utf-8")
    pantheons = json.loads(raw)["pantheons"]
    rosters = {
        pantheon: tuple(Deity.from_dict(d) for d in pantheons[pantheon.value])
        for pantheon in Pantheon
    }
    log.info(
        "Loaded %d deities across %d pantheons",
        sum(len(r) for r in rosters.values()), len(rosters),
    )
    return rosters


def generate_domain(rng: RandomSource, influences: Sequence[Domain] = ()) -> Domain:
    """Choose a domain, favoring ones that appear in the influences."""
    domain = choose_exp_weighted(rng, list(Domain), lambda d: influences.count(d))
    log.debug("Generated domain %s", domain)
    return domain


def generate_deity(
    rng: RandomSource,
    domain: Optional[Domain] = None,
    pantheon_influences: Sequence[Pantheon] = (),
    attitude_influences: Sequence[Attitude] = (),
    morality_influences: Sequence[Morality] = (),
    required: bool = False,
    weighting: AlignmentWeighting = AlignmentWeighting.OCCURRENCE,
) -> Optional[Deity]:
    """Choose a pantheon, then a deity within it.

    A pantheon scores the summed alignment affinity of its deities. Every
    time it appears in ``pantheon_influences`` it gains the best pantheon's
    score again, so cultural ties outweigh alignment fit. The deity is then
    drawn from that pantheon by its own alignment affinity.

    Args:
        rng: Random source
        domain: Only consider deities whose portfolio includes this domain
        pantheon_influences: Pantheons suggested by race or culture
        attitude_influences: Attitudes suggested by earlier choices
        morality_influences: Moralities suggested by earlier choices
        required: Always return a deity. Otherwise a poorly matched deity
            is likely to be dropped in favor of none at all.
        weighting: Alignment scoring scheme

    Returns:
        The chosen deity, or None

    Raises:
        EmptyCandidatesError: If no deity has the requested domain
    """
    rosters: Dict[Pantheon, List[Deity]] = {}
    for pantheon in Pantheon:
        deities = [d for d in pantheon.deities() if domain is None or domain in d.domains]
        if deities:
            rosters[pantheon] = deities
    if not rosters:
        raise EmptyCandidatesError()

    def deity_score(deity: Deity) -> int:
        return deity.weight(attitude_influences, morality_influences, weighting)

    pantheon_scores = {
        pantheon: sum(deity_score(d) for d in deities)
        for pantheon, deities in rosters.items()
    }
    max_score = max(pantheon_scores.values())

    pantheon = choose_exp_weighted(
        rng,
        list(rosters),
        lambda p: pantheon_scores[p] + max_score * pantheon_influences.count(p),
    )
    deity = choose_exp_weighted(rng, rosters[pantheon], deity_score)
    log.debug("Chose %s from the %s pantheon", deity.name, pantheon)

    if required:
        return deity

    kept = choose_weighted(rng, [deity, None], exp_weights([deity_score(deity), 0]))
    if kept is None:
        log.debug("Dropped %s, character has no favored deity", deity.name)
    return kept
