"""Customer record value type and conversions between record sets and DataFrames."""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields
from typing import Iterable, Mapping, Tuple

import numpy as np
import pandas as pd

from common.errors import UnknownFieldError
from models.metadata import metadata_customer


@dataclass(frozen=True, slots=True)
class Record:
    """One observation of customer purchase behaviour."""

    age: int
    income: int
    purchase_amount: float
    satisfaction: float


RecordSet = Tuple[Record, ...]

FIELDS = tuple(f.name for f in fields(Record))


def field_values(records: Iterable[Record], name: str) -> np.ndarray:
    """Collect a single field of every record into a float array."""
    if name not in FIELDS:
        raise UnknownFieldError(name)
    return np.array([getattr(r, name) for r in records], dtype=float)


def records_to_frame(records: Iterable[Record]) -> pd.DataFrame:
    """Converts a record set into a DataFrame with one column per field."""
    return pd.DataFrame([astuple(r) for r in records], columns=list(FIELDS))


def frame_to_records(df: pd.DataFrame) -> RecordSet:
    """Converts a DataFrame with the record columns back into a record set."""
    missing = set(FIELDS) - set(df.columns)
    if missing:
        raise UnknownFieldError(", ".join(sorted(missing)))
    return tuple(
        Record(
            age=int(row.age),
            income=int(row.income),
            purchase_amount=float(row.purchase_amount),
            satisfaction=float(row.satisfaction),
        )
        for row in df[list(FIELDS)].itertuples(index=False)
    )


def records_from_columns(columns: Mapping[str, np.ndarray]) -> RecordSet:
    """Round and clamp raw generated columns, then pack them into records.

    Every column is conformed through its field metadata, so the returned
    records always satisfy the field bounds.
    """
    conformed = {name: metadata_customer[name].conform(columns[name]) for name in FIELDS}
    return tuple(
        Record(
            age=int(age),
            income=int(income),
            purchase_amount=float(purchase_amount),
            satisfaction=float(satisfaction),
        )
        for age, income, purchase_amount, satisfaction in zip(
            *(conformed[name] for name in FIELDS)
        )
    )
