"""
Random Number Generator Module

This module implements the RNG service consumed by every variation operator
(trait initialization, mating and mutation).

Classes:
    RNG: Seedable source of uniform, signed and weighted ("roulette") draws
"""

import numpy as np
from typing import Sequence

class RNG:
    """
    A seedable random number generator.

    The RNG is never global state: it is created by the caller and passed
    explicitly into every operation that needs randomness. Two RNGs built
    from the same seed produce the same sequence of draws, which makes gene
    evolution reproducible.

    A single RNG instance must not be shared between threads without external
    synchronization. Use 'spawn()' to obtain independent streams instead.

    Public Methods:
        seed(seed):                  Restart the stream from a given seed
        uniform_int(lo, hi):         Uniform integer in [lo, hi]
        uniform_float():             Uniform float in [0, 1)
        signed_uniform_float():      Uniform float in [-1, 1)
        weighted_pick(weights):      Index drawn with probability proportional to its weight
        spawn(n):                    Create 'n' independent child generators
    """

    def __init__(self, seed: int | None = None):
        """
        Initialize the generator.

        Parameters:
            seed: Seed for the underlying numpy generator (None for fresh OS entropy)
        """
        self._generator: np.random.Generator = np.random.default_rng(seed)

    @classmethod
    def from_generator(cls, generator: np.random.Generator) -> 'RNG':
        """
        Wrap an existing numpy generator (no copy is made).
        """
        rng = cls.__new__(cls)
        rng._generator = generator
        return rng

    def seed(self, seed: int | None) -> None:
        self._generator = np.random.default_rng(seed)

    def uniform_int(self, lo: int, hi: int) -> int:
        """
        Draw an integer uniformly from the closed interval [lo, hi].

        Raises:
            ValueError: If 'lo' is greater than 'hi'
        """
        if lo > hi:
            raise ValueError(f"Empty integer range [{lo}, {hi}]")
        return int(self._generator.integers(lo, hi, endpoint=True))

    def uniform_float(self) -> float:
        return float(self._generator.random())

    def signed_uniform_float(self) -> float:
        return 2.0 * float(self._generator.random()) - 1.0

    def weighted_pick(self, weights: Sequence[float]) -> int:
        """
        Roulette-wheel selection.

        The weights need not sum to 1; each index is selected with probability
        weight / sum(weights). Indices with zero weight are never selected.

        Parameters:
            weights: Non-negative selection weights

        Returns:
            The selected index

        Raises:
            ValueError: If 'weights' is empty, contains a negative value or sums to zero
        """
        w = np.asarray(weights, dtype=float)
        if w.size == 0:
            raise ValueError("Cannot pick from an empty weight sequence")
        if np.any(w < 0):
            raise ValueError(f"Selection weights must be non-negative, got {list(weights)}")

        cumulative = np.cumsum(w)
        total      = cumulative[-1]
        if total <= 0:
            raise ValueError("Selection weights must have a positive sum")

        r   = float(self._generator.random()) * total
        idx = int(np.searchsorted(cumulative, r, side='right'))
        return min(idx, int(np.flatnonzero(w)[-1]))   # rounding at the upper edge

    def spawn(self, n: int) -> list['RNG']:
        """
        Create 'n' statistically independent child generators.

        Spawning advances this generator's internal seed sequence, so spawning
        twice gives different children; the children of two identically seeded
        parents are identical.

        Parameters:
            n: Number of children

        Returns:
            List of new RNG objects
        """
        return [RNG.from_generator(g) for g in self._generator.spawn(n)]

    def __repr__(self):
        return f"RNG(bit_generator={type(self._generator.bit_generator).__name__})"
