"""Initialization module for common"""

from .dataclasses import FieldStats, HistogramBin
from .errors import DegenerateFieldError, EmptyInputError, UnknownFieldError
from .utilities import make_rng, round_half_up, set_seed

__all__ = [
    "FieldStats",
    "HistogramBin",
    "DegenerateFieldError",
    "EmptyInputError",
    "UnknownFieldError",
    "make_rng",
    "round_half_up",
    "set_seed",
]
