"""Baseline ("real") customer dataset sampler."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from common.utilities import make_rng
from models.metadata import metadata_customer
from models.record import RecordSet, records_from_columns

LOGGER = logging.getLogger(__name__)

DEFAULT_SIZE = 1000


def generate_baseline(
    n: int = DEFAULT_SIZE, rng: Optional[np.random.Generator] = None
) -> RecordSet:
    """Sample ``n`` records of simulated customer purchase behaviour.

    Income grows exponentially with age, purchase amount grows with income
    and age, and satisfaction grows with income. Downstream formulas use the
    clamped but unrounded age and income; rounding happens once at the end.

    Args:
        n: Number of records to draw.
        rng: Randomness source; a fresh unseeded generator when omitted.

    Returns:
        RecordSet
            Records satisfying the field bounds of ``metadata_customer``.
    """
    if n < 0:
        raise ValueError(f"number of records must be non-negative, got {n}")
    rng = rng if rng is not None else make_rng()

    u = rng.random((n, 6))
    age_meta = metadata_customer["age"]
    income_meta = metadata_customer["income"]

    age = np.clip(
        35 + u[:, 0] * 25 + (u[:, 1] - 0.5) * 10,
        age_meta.min_value,
        age_meta.max_value,
    )
    income = np.maximum(
        income_meta.min_value,
        np.exp(9.5 + u[:, 2] * 1.2 + age * 0.01) + (u[:, 3] - 0.5) * 10000,
    )
    purchase_amount = 50 + income * 0.0003 + age * 0.5 + (u[:, 4] - 0.5) * 30
    satisfaction = 7 + (income / 100000) * 2 + (u[:, 5] - 0.5) * 3

    records = records_from_columns(
        {
            "age": age,
            "income": income,
            "purchase_amount": purchase_amount,
            "satisfaction": satisfaction,
        }
    )
    LOGGER.debug("Sampled %d baseline records", len(records))
    return records
