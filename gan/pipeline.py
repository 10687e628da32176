"""
pipeline.py

Interpolation-based ("GAN-style") synthetic record generator.

Each synthetic record is the field-wise mean of a small group of baseline
records drawn with replacement, perturbed by independent uniform noise.
Nothing is learned: diversity comes from the perturbation of interpolated
real samples instead of sampling a fitted distribution.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from common.errors import EmptyInputError
from common.utilities import make_rng
from gan.dataclasses.training import GanConfig
from gan.utilities import sample_groups, uniform_noise
from models.record import FIELDS, Record, RecordSet, field_values, records_from_columns

LOGGER = logging.getLogger(__name__)


class GAN:
    """Generates records by perturbing averages of random baseline groups."""

    def __init__(
        self,
        config: Optional[GanConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.config = config or GanConfig()
        if self.config.group_size < 1:
            raise ValueError(
                f"group_size must be at least 1, got {self.config.group_size}"
            )
        self.rng = rng if rng is not None else make_rng(self.config.seed)

    def generate(self, baseline: Sequence[Record], n: int) -> RecordSet:
        """Generate ``n`` synthetic records from groups of ``baseline`` records.

        Raises:
            ValueError: ``n`` is negative.
            EmptyInputError: ``baseline`` is empty.
        """
        if n < 0:
            raise ValueError(f"number of records must be non-negative, got {n}")
        if len(baseline) == 0:
            raise EmptyInputError("cannot interpolate from an empty baseline")

        groups = sample_groups(self.rng, len(baseline), n, self.config.group_size)
        columns = {}
        for name in FIELDS:
            interpolated = field_values(baseline, name)[groups].mean(axis=1)
            amplitude = getattr(self.config.noise, name)
            columns[name] = interpolated + uniform_noise(self.rng, n, amplitude)

        records = records_from_columns(columns)
        LOGGER.info(
            "GAN-style generator produced %d records (groups of %d)",
            len(records),
            self.config.group_size,
        )
        return records
