# bag_of_holding/models/languages.py
"""Languages a character can speak and understand."""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence

from ..core.rng import RandomSource
from ..core.weighted import choose_exp_weighted
from .base import Language

log = logging.getLogger(__name__)

# How often a character ignores the languages suggested by race or culture
IGNORE_LIKELY_CHANCE = 0.1


class Languages:
    """Set of languages known by a character. Everyone knows Common."""

    def __init__(self, languages: Iterable[Language] = ()):
        self._languages = {Language.COMMON, *languages}

    def __contains__(self, language: object) -> bool:
        return language in self._languages

    def __len__(self) -> int:
        return len(self._languages)

    def __iter__(self) -> Iterator[Language]:
        # Stable, enum declaration order
        return (language for language in Language if language in self._languages)

    def remaining(self) -> List[Language]:
        """Languages the character does not know yet."""
        return [language for language in Language if language not in self._languages]

    def choose(self, rng: RandomSource, likely_languages: Sequence[Language] = ()) -> Optional[Language]:
        """Learn one new language, biased toward likely ones.

        Most of the time a likely language that is still unknown is picked
        at random. Otherwise, or when no likely language is left, any
        remaining language can be picked, with standard languages strongly
        favored over exotic ones.

        Returns:
            The newly learned language, or None if every language is known
        """
        remaining = self.remaining()
        if not remaining:
            return None

        likely = [language for language in remaining if language in likely_languages]
        if not likely or rng.random() < IGNORE_LIKELY_CHANCE:
            language = choose_exp_weighted(rng, remaining, lambda l: l.language_type.value)
        else:
            language = rng.choice(likely)

        self._languages.add(language)
        log.debug("Learned language %s", language)
        return language

    def choose_multiple(
        self,
        rng: RandomSource,
        amount: int,
        likely_languages: Sequence[Language] = (),
    ) -> List[Language]:
        """Learn up to ``amount`` new languages, one after another."""
        learned = []
        for _ in range(amount):
            language = self.choose(rng, likely_languages)
            if language is None:
                break
            learned.append(language)
        return learned

    def to_list(self) -> List[str]:
        """Language names, in declaration order."""
        return [language.value for language in self]

    def __repr__(self) -> str:
        return f"Languages({self.to_list()!r})"
