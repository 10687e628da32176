"""Python module to define enumerations for data types and generation methods."""

from enum import Enum


class DataType(Enum):
    """Enumeration for different data types."""

    INTEGER = "int"
    DECIMAL = "decimal"


class MethodType(Enum):
    """Synthetic data generation strategies."""

    VAE = "vae"
    GAN = "gan"
