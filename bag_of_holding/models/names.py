# bag_of_holding/models/names.py
"""Name generation for the races of the D&D multiverse."""

import json
import logging
from enum import Enum
from functools import lru_cache
from importlib import resources
from typing import Dict, Tuple

from ..core.rng import RandomSource

log = logging.getLogger(__name__)

DATA_PACKAGE = "bag_of_holding.data"
NAMES_FILE = "names.json"


@lru_cache(maxsize=None)
def load_name_tables() -> Dict[str, Dict[str, Tuple[str, ...]]]:
    """Load every race's name lists from package data."""
    raw = resources.files(DATA_PACKAGE).joinpath(NAMES_FILE).read_text(encoding="utf-8")
    return {
        race: {kind: tuple(names) for kind, names in tables.items()}
        for race, tables in json.loads(raw).items()
    }


class NameGenerator(Enum):
    """Available name generators."""
    DRAGONBORN = "dragonborn"
    DWARF = "dwarf"
    ELF = "elf"
    HALFLING = "halfling"

    def _pick(self, rng: RandomSource, kind: str) -> str:
        return rng.choice(load_name_tables()[self.value][kind])

    def _first_name(self, rng: RandomSource) -> str:
        return self._pick(rng, rng.choice(("female", "male")))

    def gen(self, rng: RandomSource) -> str:
        """Generate a full name, formatted for a character sheet."""
        if self is NameGenerator.DRAGONBORN:
            # Clan name goes last, childhood nickname in quotes
            name = f'{self._first_name(rng)} "{self._pick(rng, "child")}" {self._pick(rng, "clan")}'
        elif self is NameGenerator.DWARF:
            name = f"{self._first_name(rng)} {self._pick(rng, 'clan')}"
        elif self is NameGenerator.ELF:
            name = f'{self._first_name(rng)} "{self._pick(rng, "child")}" {self._pick(rng, "family")}'
        else:
            name = f"{self._first_name(rng)} {self._pick(rng, 'family')}"

        log.debug("Generated %s name %r", self.value, name)
        return name

    def __str__(self) -> str:
        return self.value
