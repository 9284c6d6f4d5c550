# tests/test_alignments.py
"""Tests for alignments."""

from collections import Counter

import pytest

from bag_of_holding.models.alignments import Alignment, AlignmentWeighting, axis_score
from bag_of_holding.models.base import Attitude, Morality


class TestAlignmentDisplay:
    """Test alignment display and parsing."""

    def test_true_neutral(self):
        """Neutral Neutral is just Neutral."""
        assert str(Alignment(Attitude.NEUTRAL, Morality.NEUTRAL)) == "Neutral"

    def test_two_words(self):
        """Other alignments show both axes."""
        assert str(Alignment(Attitude.CHAOTIC, Morality.GOOD)) == "Chaotic Good"
        assert str(Alignment(Attitude.NEUTRAL, Morality.EVIL)) == "Neutral Evil"

    def test_all_nine_parse_back(self):
        """Every display string parses to the same alignment."""
        alignments = Alignment.all()
        assert len(set(alignments)) == 9
        for alignment in alignments:
            assert Alignment.from_string(str(alignment)) == alignment

    @pytest.mark.parametrize("text", ["", "Lawful", "Good Lawful", "Lawful Good Evil"])
    def test_invalid_strings(self, text):
        """Unknown alignment text is rejected."""
        with pytest.raises(ValueError):
            Alignment.from_string(text)


class TestAxisScore:
    """Test the two weighting schemes."""

    def test_occurrence(self):
        """Occurrence counts matching influences."""
        influences = [Attitude.LAWFUL, Attitude.LAWFUL, Attitude.CHAOTIC]
        assert axis_score(Attitude.LAWFUL, influences) == 2
        assert axis_score(Attitude.CHAOTIC, influences) == 1
        assert axis_score(Attitude.NEUTRAL, influences) == 0

    def test_compatibility(self):
        """Compatibility uses the pairwise table."""
        scheme = AlignmentWeighting.COMPATIBILITY
        assert axis_score(Morality.GOOD, [Morality.GOOD], scheme) == 3
        assert axis_score(Morality.GOOD, [Morality.NEUTRAL], scheme) == 1
        assert axis_score(Morality.GOOD, [Morality.EVIL], scheme) == 0
        assert axis_score(Morality.NEUTRAL, [Morality.NEUTRAL], scheme) == 2
        assert axis_score(Attitude.CHAOTIC, [Attitude.LAWFUL, Attitude.CHAOTIC], scheme) == 3

    def test_no_influences(self):
        """Nothing to match scores zero either way."""
        for scheme in AlignmentWeighting:
            assert axis_score(Attitude.LAWFUL, [], scheme) == 0


class TestAlignmentWeight:
    """Test alignment affinity queries."""

    def test_weight_sums_axes(self):
        """Weight adds attitude and morality scores."""
        alignment = Alignment(Attitude.LAWFUL, Morality.GOOD)
        assert alignment.weight([Attitude.LAWFUL, Attitude.LAWFUL], [Morality.GOOD]) == 3
        assert alignment.weight([Attitude.CHAOTIC], [Morality.EVIL]) == 0

    def test_weight_compatibility(self):
        """Weight honours the selected scheme."""
        alignment = Alignment(Attitude.NEUTRAL, Morality.NEUTRAL)
        weight = alignment.weight(
            [Attitude.NEUTRAL], [Morality.GOOD], AlignmentWeighting.COMPATIBILITY
        )
        assert weight == 3

    def test_own_influences(self):
        """An alignment pushes toward itself."""
        alignment = Alignment(Attitude.CHAOTIC, Morality.EVIL)
        assert alignment.attitude_influences() == [Attitude.CHAOTIC]
        assert alignment.morality_influences() == [Morality.EVIL]


class TestAlignmentGeneration:
    """Test generating alignments."""

    def test_no_influences_reaches_everything(self, rng):
        """Without influences every alignment shows up."""
        results = {Alignment.generate(rng) for _ in range(1000)}
        assert results == set(Alignment.all())

    def test_influences_bias_results(self, rng):
        """Influenced axes come up more often."""
        counts = Counter(
            Alignment.generate(rng, [Attitude.LAWFUL] * 3, [Morality.GOOD] * 3)
            for _ in range(1000)
        )
        lawful_good = counts[Alignment(Attitude.LAWFUL, Morality.GOOD)]
        chaotic_evil = counts[Alignment(Attitude.CHAOTIC, Morality.EVIL)]
        assert lawful_good > chaotic_evil
        assert lawful_good > 500
