"""
pipeline.py

Distribution-based ("VAE-style") synthetic record generator.

The generator never trains a network. It reads the summary statistics of a
baseline record set and samples each output record from two shared latent
draws, so cross-field correlation comes back through the shared noise terms:

- age is driven by the first latent draw;
- income mixes its own draw with a share of the age draw;
- purchase amount and satisfaction follow the standardized income (and age).
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from analytics.statistics import compute_stats
from common.utilities import make_rng
from models.record import Record, RecordSet, records_from_columns
from vae.dataclasses.training import VaeConfig
from vae.utilities import draw_latents

LOGGER = logging.getLogger(__name__)


class VAE:
    """Samples synthetic records from the learned mean/std of a baseline set."""

    def __init__(
        self,
        config: Optional[VaeConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.config = config or VaeConfig()
        self.rng = rng if rng is not None else make_rng(self.config.seed)

    def generate(self, baseline: Sequence[Record], n: int) -> RecordSet:
        """Generate ``n`` synthetic records shaped like ``baseline``.

        Raises:
            ValueError: ``n`` is negative.
            EmptyInputError: ``baseline`` is empty.
        """
        if n < 0:
            raise ValueError(f"number of records must be non-negative, got {n}")

        stats = compute_stats(baseline)
        s_age, s_income = stats["age"], stats["income"]
        s_purchase, s_satisfaction = stats["purchase_amount"], stats["satisfaction"]
        cfg = self.config

        age_z, income_z = draw_latents(self.rng, n)
        age = s_age.mean + age_z * s_age.std
        income = s_income.mean + (income_z + age_z * cfg.age_income_coupling) * s_income.std

        income_std = s_income.standardize(income)
        purchase_amount = (
            s_purchase.mean
            + income_std * s_purchase.std * cfg.income_purchase_weight
            + s_age.standardize(age) * s_purchase.std * cfg.age_purchase_weight
        )
        satisfaction = (
            s_satisfaction.mean
            + income_std * s_satisfaction.std * cfg.income_satisfaction_weight
        )

        records = records_from_columns(
            {
                "age": age,
                "income": income,
                "purchase_amount": purchase_amount,
                "satisfaction": satisfaction,
            }
        )
        LOGGER.info(
            "VAE-style generator produced %d records from %d baseline records",
            len(records),
            len(baseline),
        )
        return records
