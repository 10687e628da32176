"""
statistics.py

Descriptive statistics used to compare real and synthetic record sets:

- compute_stats: mean / population std / min / max / lower median per field.
- correlation: Pearson correlation between two fields.
- correlation_matrix: correlation of every field pair.
- histogram: aligned bin counts of one field over two record sets.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Sequence

import numpy as np
import pandas as pd

from common.dataclasses import FieldStats, HistogramBin
from common.errors import DegenerateFieldError, EmptyInputError
from common.utilities import round_half_up
from models.enums import DataType
from models.metadata import metadata_customer
from models.record import FIELDS, Record, field_values

LOGGER = logging.getLogger(__name__)


def _stored(name: str, value: float):
    """Cast an array element back to the field's stored python type."""
    if metadata_customer[name].data_type is DataType.INTEGER:
        return int(value)
    return float(value)


def compute_stats(records: Sequence[Record]) -> Dict[str, FieldStats]:
    """Per-field descriptive statistics of a record set.

    mean and std are rounded half-up to 2 decimals; min, max and median are
    stored values. The median is the element at ``n // 2`` of the sorted
    values; for even ``n`` the two middle values are not averaged.
    """
    if len(records) == 0:
        raise EmptyInputError("cannot compute statistics of an empty record set")

    stats = {}
    for name in FIELDS:
        values = field_values(records, name)
        mean = values.mean()
        std = math.sqrt(((values - mean) ** 2).mean())
        ordered = np.sort(values)
        stats[name] = FieldStats(
            mean=round_half_up(mean, 2),
            std=round_half_up(std, 2),
            min=_stored(name, ordered[0]),
            max=_stored(name, ordered[-1]),
            median=_stored(name, ordered[len(ordered) // 2]),
        )
    return stats


def correlation(records: Sequence[Record], field_a: str, field_b: str) -> float:
    """Pearson correlation of two fields, rounded half-up to 3 decimals.

    Raises:
        EmptyInputError: the record set is empty.
        DegenerateFieldError: either field is constant over the set.
    """
    if len(records) == 0:
        raise EmptyInputError("cannot correlate fields of an empty record set")

    x = field_values(records, field_a)
    y = field_values(records, field_b)
    dx = x - x.mean()
    dy = y - y.mean()

    std_x = math.sqrt((dx**2).mean())
    std_y = math.sqrt((dy**2).mean())
    for name, std in ((field_a, std_x), (field_b, std_y)):
        if std == 0:
            raise DegenerateFieldError(name)

    cov = (dx * dy).mean()
    return round_half_up(cov / (std_x * std_y), 3)


def correlation_matrix(records: Sequence[Record]) -> pd.DataFrame:
    """Correlation of every field pair, as a symmetric DataFrame."""
    matrix = pd.DataFrame(index=list(FIELDS), columns=list(FIELDS), dtype=float)
    for i, a in enumerate(FIELDS):
        for b in FIELDS[i:]:
            value = correlation(records, a, b)
            matrix.loc[a, b] = value
            matrix.loc[b, a] = value
    return matrix


def histogram(
    field: str,
    set_a: Sequence[Record],
    set_b: Sequence[Record],
    bins: int = 20,
) -> List[HistogramBin]:
    """Bin ``field`` of two record sets over their common range.

    Bins split ``[min, max]`` of the union into ``bins`` equal widths; the
    maximum value lands in the last bin.

    Raises:
        ValueError: ``bins`` is smaller than 1.
        EmptyInputError: both sets are empty.
        DegenerateFieldError: every value of the field is identical.
    """
    if bins < 1:
        raise ValueError(f"bins must be at least 1, got {bins}")

    a = field_values(set_a, field)
    b = field_values(set_b, field)
    union = np.concatenate([a, b])
    if union.size == 0:
        raise EmptyInputError("cannot bin two empty record sets")

    low, high = union.min(), union.max()
    if high == low:
        raise DegenerateFieldError(field, "range")
    width = (high - low) / bins

    def _counts(values: np.ndarray) -> np.ndarray:
        idx = np.minimum(bins - 1, np.floor((values - low) / width).astype(np.int64))
        return np.bincount(idx, minlength=bins)

    counts_a, counts_b = _counts(a), _counts(b)
    LOGGER.debug(
        "Histogram of %s: %d bins of width %.4f over [%s, %s]",
        field,
        bins,
        width,
        low,
        high,
    )
    return [
        HistogramBin(
            range_start=int(round_half_up(low + i * width)),
            count_a=int(counts_a[i]),
            count_b=int(counts_b[i]),
        )
        for i in range(bins)
    ]
