# Package initialization for models

from . import enums
from . import field_metadata
from .enums import DataType, MethodType
from .field_metadata import FieldMetadata
from .metadata import metadata_customer
from .record import (
    FIELDS,
    Record,
    RecordSet,
    field_values,
    frame_to_records,
    records_from_columns,
    records_to_frame,
)

__all__ = [
    "enums",
    "field_metadata",
    "DataType",
    "MethodType",
    "FieldMetadata",
    "FIELDS",
    "metadata_customer",
    "Record",
    "RecordSet",
    "field_values",
    "records_to_frame",
    "frame_to_records",
    "records_from_columns",
]
