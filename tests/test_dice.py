# tests/test_dice.py
"""Tests for dice rolling."""

import random

import pytest

from bag_of_holding.core.dice import Die, Roll, roll, roll_multiple, roll_pool


class TestRoll:
    """Test single and multiple die rolls."""

    def test_roll_stays_in_range(self, rng):
        """Every roll lands between 1 and the number of sides."""
        for sides in (1, 4, 6, 20, 100):
            for _ in range(200):
                assert 1 <= roll(rng, sides) <= sides

    def test_roll_reaches_both_ends(self, rng):
        """A d6 produces its lowest and highest face."""
        results = {roll(rng, 6) for _ in range(500)}
        assert results == {1, 2, 3, 4, 5, 6}

    def test_roll_multiple_length(self, rng):
        """roll_multiple returns exactly count results."""
        assert len(roll_multiple(rng, 8, 5)) == 5
        assert roll_multiple(rng, 8, 0) == []

    def test_same_seed_same_rolls(self):
        """Rolls are reproducible from a fixed seed."""
        first = roll_multiple(random.Random(7), 20, 10)
        second = roll_multiple(random.Random(7), 20, 10)
        assert first == second


class TestDie:
    """Test the Die enum."""

    def test_sides(self):
        """Die sides match their names."""
        assert Die.D4.sides == 4
        assert Die.D20.sides == 20
        assert Die.D100.sides == 100

    def test_parse_from_text(self):
        """Dice parse from their display names."""
        assert Die("d6") is Die.D6
        assert str(Die.D12) == "d12"
        with pytest.raises(ValueError):
            Die("d7")

    def test_roll_multiple(self, rng):
        """Rolling several of a die stays in range."""
        results = Die.D10.roll_multiple(rng, 50)
        assert len(results) == 50
        assert all(1 <= r <= 10 for r in results)


class TestRollExpression:
    """Test dice expressions like 2d8."""

    def test_bounds_and_display(self):
        """min, max and display text."""
        expression = Roll(2, Die.D8)
        assert expression.min == 2
        assert expression.max == 16
        assert str(expression) == "2d8"

    def test_gen(self, rng):
        """gen returns one result per die."""
        expression = Roll(3, Die.D4)
        for _ in range(100):
            results = expression.gen(rng)
            assert len(results) == 3
            assert expression.min <= sum(results) <= expression.max


class TestRollPool:
    """Test rolling mixed dice together."""

    def test_pool_results(self, rng):
        """Each die in the pool gets its own results."""
        results = roll_pool(rng, {Die.D6: 2, Die.D20: 1})
        assert set(results) == {Die.D6, Die.D20}
        assert len(results[Die.D6]) == 2
        assert len(results[Die.D20]) == 1
        assert 1 <= results[Die.D20][0] <= 20

    def test_empty_pool(self, rng):
        """An empty pool rolls nothing."""
        assert roll_pool(rng, {}) == {}
