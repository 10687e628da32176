"""Utilities methods for a project"""

import random
from typing import Optional, Union

import numpy as np


def set_seed(seed: int = 42) -> None:
    """Set the global library RNGs for reproducibility.

    Args:
        seed: Arbitrary integer used to seed *random* and *NumPy* generators.
    """
    random.seed(seed)
    np.random.seed(seed)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return an independent NumPy generator; ``None`` draws fresh OS entropy."""
    return np.random.default_rng(seed)


def round_half_up(
    value: Union[float, np.ndarray], decimals: int = 0
) -> Union[float, np.ndarray]:
    """Round to ``decimals`` places with .5 going toward positive infinity.

    Python's ``round`` and ``np.round`` use banker's rounding, which would
    shift generated values compared to the reference formulas.
    """
    factor = 10.0**decimals
    rounded = np.floor(np.asarray(value, dtype=float) * factor + 0.5) / factor
    if np.ndim(rounded) == 0:
        return float(rounded)
    return rounded
