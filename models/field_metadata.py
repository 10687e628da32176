"""Field metadata for data generation."""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from common.utilities import round_half_up
from models.enums import DataType


@dataclass(frozen=True, slots=True)
class FieldMetadata:
    """Metadata for a field in the dataset."""

    data_type: DataType
    """The type of data (Integer or Decimal)."""

    decimal_places: Optional[int] = None
    """For decimal fields: number of decimal places kept after rounding."""

    min_value: Optional[float] = None
    """Lower clamp bound, if any."""

    max_value: Optional[float] = None
    """Upper clamp bound, if any."""

    def conform(self, values: np.ndarray) -> np.ndarray:
        """Round raw generated values and clamp them into the field bounds."""
        places = 0 if self.data_type is DataType.INTEGER else self.decimal_places or 0
        out = round_half_up(np.asarray(values, dtype=float), places)
        if self.min_value is not None or self.max_value is not None:
            out = np.clip(out, self.min_value, self.max_value)
        if self.data_type is DataType.INTEGER:
            return out.astype(np.int64)
        return out
