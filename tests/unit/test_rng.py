"""
Unit tests for the RNG class.

Tests cover the ranges of all draws, roulette selection, seeding and spawning.
"""

import pytest
import numpy as np

from neatgenes.rng import RNG


# ============================================================================
# Test: Draw ranges
# ============================================================================

class TestRNGRanges:
    """Test that every draw lies in its documented range."""

    def test_uniform_int_inclusive_bounds(self, rng):
        """Test that uniform_int reaches both ends of [lo, hi] and nothing else."""
        values = {rng.uniform_int(-2, 2) for _ in range(1000)}
        assert values == {-2, -1, 0, 1, 2}

    def test_uniform_int_degenerate_range(self, rng):
        """Test that uniform_int(lo, lo) always returns lo."""
        assert all(rng.uniform_int(7, 7) == 7 for _ in range(20))

    def test_uniform_int_returns_python_int(self, rng):
        """Test that uniform_int returns a plain int, not a numpy integer."""
        assert type(rng.uniform_int(0, 10)) is int

    def test_uniform_int_empty_range_raises(self, rng):
        """Test that lo > hi raises ValueError."""
        with pytest.raises(ValueError, match="Empty integer range"):
            rng.uniform_int(3, 2)

    def test_uniform_float_range(self, rng):
        """Test that uniform_float lies in [0, 1)."""
        for _ in range(1000):
            x = rng.uniform_float()
            assert 0.0 <= x < 1.0

    def test_signed_uniform_float_range(self, rng):
        """Test that signed_uniform_float lies in [-1, 1) and takes both signs."""
        values = [rng.signed_uniform_float() for _ in range(1000)]
        assert all(-1.0 <= v < 1.0 for v in values)
        assert min(values) < -0.5
        assert max(values) > 0.5


# ============================================================================
# Test: Weighted pick
# ============================================================================

class TestRNGWeightedPick:
    """Test roulette-wheel selection."""

    def test_proportional_selection(self, rng):
        """Test that indices are picked proportionally to their weights."""
        counts = np.zeros(3)
        trials = 10000
        for _ in range(trials):
            counts[rng.weighted_pick([1.0, 1.0, 2.0])] += 1

        frequencies = counts / trials
        assert frequencies[0] == pytest.approx(0.25, abs=0.03)
        assert frequencies[1] == pytest.approx(0.25, abs=0.03)
        assert frequencies[2] == pytest.approx(0.50, abs=0.03)

    def test_weights_need_not_sum_to_one(self, rng):
        """Test that unnormalized weights work."""
        picks = {rng.weighted_pick([10, 30]) for _ in range(200)}
        assert picks == {0, 1}

    def test_zero_weight_never_picked(self, rng):
        """Test that entries with zero weight are never selected."""
        for _ in range(1000):
            assert rng.weighted_pick([0.0, 1.0, 0.0, 3.0, 0.0]) in (1, 3)

    def test_single_weight(self, rng):
        """Test that a single entry is always picked."""
        assert rng.weighted_pick([0.3]) == 0

    def test_empty_weights_raise(self, rng):
        """Test that an empty weight sequence raises ValueError."""
        with pytest.raises(ValueError, match="empty"):
            rng.weighted_pick([])

    def test_negative_weight_raises(self, rng):
        """Test that negative weights raise ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            rng.weighted_pick([1.0, -1.0])

    def test_zero_total_raises(self, rng):
        """Test that all-zero weights raise ValueError."""
        with pytest.raises(ValueError, match="positive sum"):
            rng.weighted_pick([0.0, 0.0])


# ============================================================================
# Test: Reproducibility
# ============================================================================

class TestRNGReproducibility:
    """Test seeding and spawning."""

    def test_same_seed_same_sequence(self):
        """Test that two RNGs with the same seed produce the same draws."""
        rng1 = RNG(seed=123)
        rng2 = RNG(seed=123)

        draws1 = [rng1.uniform_float() for _ in range(10)] + [rng1.uniform_int(0, 100) for _ in range(10)]
        draws2 = [rng2.uniform_float() for _ in range(10)] + [rng2.uniform_int(0, 100) for _ in range(10)]

        assert draws1 == draws2

    def test_different_seeds_differ(self):
        """Test that different seeds produce different draws."""
        assert RNG(seed=1).uniform_float() != RNG(seed=2).uniform_float()

    def test_reseed_restarts_stream(self):
        """Test that seed() restarts the sequence."""
        rng = RNG(seed=5)
        first = [rng.uniform_float() for _ in range(5)]
        rng.seed(5)
        assert [rng.uniform_float() for _ in range(5)] == first

    def test_from_generator_wraps_numpy_generator(self):
        """Test wrapping an existing numpy generator."""
        rng1 = RNG.from_generator(np.random.default_rng(9))
        rng2 = RNG(seed=9)
        assert rng1.uniform_float() == rng2.uniform_float()

    def test_spawn_count_and_independence(self, rng):
        """Test that spawn returns independent children."""
        children = rng.spawn(4)

        assert len(children) == 4
        assert all(isinstance(child, RNG) for child in children)
        first_draws = [child.uniform_float() for child in children]
        assert len(set(first_draws)) == 4

    def test_spawn_reproducible_from_same_seed(self):
        """Test that identically seeded parents spawn identical children."""
        children1 = RNG(seed=77).spawn(3)
        children2 = RNG(seed=77).spawn(3)

        for c1, c2 in zip(children1, children2):
            assert c1.uniform_float() == c2.uniform_float()

    def test_spawning_twice_gives_new_children(self):
        """Test that consecutive spawns produce different streams."""
        rng = RNG(seed=77)
        first  = rng.spawn(1)[0].uniform_float()
        second = rng.spawn(1)[0].uniform_float()
        assert first != second
