"""Tests for the Alea PRNG and seed helpers."""

import pytest

from py_dungeon.core.alea_prng import AleaPRNG
from py_dungeon.utils.random import make_prng, new_seed


class TestAleaSequence:
    """Test reproducibility of the random stream."""

    def test_same_seed_same_sequence(self):
        """Test that the same seed produces the same stream."""
        a = AleaPRNG("dungeon")
        b = AleaPRNG("dungeon")
        assert [a.random() for _ in range(50)] == [b.random() for _ in range(50)]

    def test_different_seeds_differ(self):
        """Test that different seeds produce different streams."""
        a = AleaPRNG("seed1")
        b = AleaPRNG("seed2")
        assert [a.random() for _ in range(10)] != [b.random() for _ in range(10)]

    def test_int_and_string_seed_equivalent(self):
        """Test that integer seeds behave like their string form."""
        a = AleaPRNG(42)
        b = AleaPRNG("42")
        assert a.seed == b.seed == "42"
        assert [a.random() for _ in range(10)] == [b.random() for _ in range(10)]

    def test_values_in_unit_interval(self):
        """Test that draws stay in [0, 1)."""
        prng = AleaPRNG("unit")
        for _ in range(1000):
            value = prng.random()
            assert 0.0 <= value < 1.0

    def test_call_count_tracks_draws(self):
        """Test that every helper counts one draw."""
        prng = AleaPRNG("count")
        prng.random()
        prng.randrange(0, 10)
        prng.chance(0.5)
        assert prng.call_count == 3


class TestIntegerHelpers:
    """Test integer and probability draws."""

    def test_randrange_half_open(self):
        """Test that randrange excludes its upper bound."""
        prng = AleaPRNG("range")
        values = {prng.randrange(2, 5) for _ in range(500)}
        assert values == {2, 3, 4}

    def test_randint_inclusive(self):
        """Test that randint includes both bounds."""
        prng = AleaPRNG("inclusive")
        values = {prng.randint(1, 3) for _ in range(500)}
        assert values == {1, 2, 3}

    def test_empty_range_rejected(self):
        """Test that an empty range raises."""
        prng = AleaPRNG("empty")
        with pytest.raises(ValueError):
            prng.randrange(5, 5)

    def test_chance_extremes_consume_nothing(self):
        """Test that certain outcomes skip the draw."""
        prng = AleaPRNG("chance")
        assert prng.chance(1.0) is True
        assert prng.chance(0.0) is False
        assert prng.call_count == 0

    def test_choice_empty_raises(self):
        """Test choice on an empty sequence."""
        with pytest.raises(IndexError):
            AleaPRNG("choice").choice([])

    def test_swap_remove(self):
        """Test that swap-remove drains every element once."""
        prng = AleaPRNG("swap")
        items = list(range(10))
        picked = [prng.swap_remove(items) for _ in range(10)]
        assert sorted(picked) == list(range(10))
        assert items == []

    def test_swap_remove_empty_raises(self):
        """Test swap-remove on an empty list."""
        with pytest.raises(IndexError):
            AleaPRNG("swap").swap_remove([])


class TestSeedHelpers:
    """Test seed utilities."""

    def test_new_seed_is_short_string(self):
        """Test generated seed format."""
        seed = new_seed()
        assert isinstance(seed, str)
        assert len(seed) == 8

    def test_make_prng_without_seed(self):
        """Test that a seed is drawn when omitted."""
        prng = make_prng()
        assert len(prng.seed) == 8

    def test_make_prng_with_seed(self):
        """Test that make_prng honors the given seed."""
        assert make_prng("abc").random() == AleaPRNG("abc").random()
