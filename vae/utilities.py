"""Latent-style sampling utilities"""

from typing import Tuple

import numpy as np


def draw_latents(rng: np.random.Generator, n: int) -> Tuple[np.ndarray, np.ndarray]:
    """Two independent uniform latent draws in [-1, 1) per output record."""
    z = rng.random((n, 2)) * 2 - 1
    return z[:, 0], z[:, 1]
