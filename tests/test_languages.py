# tests/test_languages.py
"""Tests for language selection."""

from collections import Counter

from bag_of_holding.models.base import Language, LanguageType
from bag_of_holding.models.languages import Languages

TOTAL_LANGUAGES = len(Language)


class TestLanguageTypes:
    """Test standard and exotic classification."""

    def test_standard_languages(self):
        """Common tongues are standard."""
        for language in (Language.COMMON, Language.DWARVISH, Language.ELVISH, Language.HALFLING):
            assert language.language_type is LanguageType.STANDARD

    def test_exotic_languages(self):
        """Planar and secret tongues are exotic."""
        for language in (Language.DRACONIC, Language.INFERNAL, Language.THIEVES_CANT):
            assert language.language_type is LanguageType.EXOTIC


class TestLanguages:
    """Test a character's known languages."""

    def test_starts_with_common(self):
        """Everyone knows Common."""
        languages = Languages()
        assert len(languages) == 1
        assert Language.COMMON in languages
        assert languages.to_list() == ["Common"]

    def test_common_always_included(self):
        """Common is added even when not given."""
        languages = Languages([Language.ELVISH])
        assert Language.COMMON in languages
        assert len(languages) == 2

    def test_remaining(self):
        """Remaining excludes known languages."""
        remaining = Languages([Language.ORC]).remaining()
        assert Language.COMMON not in remaining
        assert Language.ORC not in remaining
        assert len(remaining) == TOTAL_LANGUAGES - 2

    def test_choose_adds_new_language(self, rng):
        """A chosen language was not known before."""
        languages = Languages()
        chosen = languages.choose(rng)
        assert chosen is not None
        assert chosen is not Language.COMMON
        assert chosen in languages
        assert len(languages) == 2

    def test_choose_prefers_likely(self, rng):
        """Likely languages are picked most of the time."""
        counts = Counter(Languages().choose(rng, [Language.DRACONIC]) for _ in range(1000))
        assert counts[Language.DRACONIC] > 850

    def test_choose_favors_standard(self, rng):
        """Without hints, standard languages dominate."""
        counts = Counter(
            Languages().choose(rng).language_type for _ in range(1000)
        )
        assert counts[LanguageType.STANDARD] > counts[LanguageType.EXOTIC]

    def test_choose_when_everything_known(self, rng):
        """Choosing with nothing left is a no-op."""
        languages = Languages(Language)
        assert languages.choose(rng) is None
        assert len(languages) == TOTAL_LANGUAGES

    def test_choose_multiple_sizes(self, rng):
        """choose_multiple grows the set to min(1 + n, total)."""
        for n in (0, 1, 3, TOTAL_LANGUAGES - 1, TOTAL_LANGUAGES, TOTAL_LANGUAGES + 5):
            languages = Languages()
            learned = languages.choose_multiple(rng, n, [Language.ELVISH, Language.SYLVAN])
            assert len(languages) == min(1 + n, TOTAL_LANGUAGES)
            assert len(learned) == len(set(learned)) == len(languages) - 1
            assert Language.COMMON in languages

    def test_iteration_order(self):
        """Languages iterate in declaration order."""
        languages = Languages([Language.SYLVAN, Language.DWARVISH])
        assert list(languages) == [Language.COMMON, Language.DWARVISH, Language.SYLVAN]
