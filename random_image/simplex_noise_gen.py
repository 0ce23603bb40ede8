# simplex_noise_gen.py
# Seeded 2D OpenSimplex noise fields, one per image channel
# pip install opensimplex numpy

from typing import Protocol

import numpy as np
from opensimplex import OpenSimplex

# opensimplex takes any int, keep seeds in the non-negative int64 range
MAX_SEED = 2**63 - 1


class NoiseField(Protocol):
    def grid(self, xs, ys) -> np.ndarray:
        """Evaluate the field at every (x, y) pair, shape (len(ys), len(xs))."""
        ...


class Simplex:
    def __init__(self, seed):
        self.seed = seed
        self._noise = OpenSimplex(seed=seed)

    @classmethod
    def from_rng(cls, rng):
        return cls(int(rng.integers(0, MAX_SEED)))

    def noise2d(self, x, y):
        # roughly in [-1, 1]
        return self._noise.noise2(x, y)

    def grid(self, xs, ys):
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        return self._noise.noise2array(xs, ys)

    def __repr__(self):
        return f"Simplex(seed={self.seed})"
