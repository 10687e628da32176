"""Side-by-side views of a real and a synthetic record set."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from analytics.statistics import compute_stats
from models.record import FIELDS, Record, records_to_frame

SCATTER_SAMPLE_SIZE = 200


def compare_stats(real: Sequence[Record], synthetic: Sequence[Record]) -> pd.DataFrame:
    """Mean and std of every field for both sets, indexed by field name."""
    real_stats = compute_stats(real)
    synth_stats = compute_stats(synthetic)
    rows = [
        {
            "field": name,
            "real_mean": real_stats[name].mean,
            "synthetic_mean": synth_stats[name].mean,
            "real_std": real_stats[name].std,
            "synthetic_std": synth_stats[name].std,
        }
        for name in FIELDS
    ]
    return pd.DataFrame(rows).set_index("field")


def scatter_sample(
    real: Sequence[Record],
    synthetic: Sequence[Record],
    k: int = SCATTER_SAMPLE_SIZE,
) -> pd.DataFrame:
    """First ``k`` records of each set stacked together with a ``type`` tag."""
    if k < 0:
        raise ValueError(f"sample size must be non-negative, got {k}")
    real_df = records_to_frame(real[:k]).assign(type="real")
    synth_df = records_to_frame(synthetic[:k]).assign(type="synthetic")
    return pd.concat([real_df, synth_df], ignore_index=True)
