"""Module for result dataclasses shared by the analytics and generators"""

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True, slots=True)
class FieldStats:
    """Descriptive statistics of one field over a record set."""

    mean: float
    std: float
    min: Number
    max: Number
    median: Number

    def standardize(self, value):
        """Distance of ``value`` from the mean in std units; 0 for a constant field."""
        if self.std == 0:
            return value * 0.0
        return (value - self.mean) / self.std


@dataclass(frozen=True, slots=True)
class HistogramBin:
    """One bin of a two-set histogram comparison."""

    range_start: int
    count_a: int
    count_b: int
