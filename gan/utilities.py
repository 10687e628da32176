"""Utilities methods for the GAN-style generator."""

import numpy as np


def sample_groups(rng: np.random.Generator, population: int, n: int, size: int) -> np.ndarray:
    """Indices of ``n`` groups of ``size`` records, drawn with replacement."""
    return rng.integers(0, population, size=(n, size))


def uniform_noise(rng: np.random.Generator, n: int, amplitude: float) -> np.ndarray:
    """Centered uniform noise of total width ``amplitude``."""
    return (rng.random(n) - 0.5) * amplitude
