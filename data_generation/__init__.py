"""
data_generation package: baseline customer sampler and the entry points that
dispatch to the VAE-style and GAN-style synthetic generators.
"""

from .baseline import DEFAULT_SIZE, generate_baseline
from .api import (
    GENERATORS,
    GeneratedData,
    SyntheticGenerator,
    generate_all,
    generate_by_distribution,
    generate_by_interpolation,
    generate_synthetic_data,
    get_generator,
)

__all__ = [
    "DEFAULT_SIZE",
    "generate_baseline",
    "GENERATORS",
    "GeneratedData",
    "SyntheticGenerator",
    "generate_all",
    "generate_by_distribution",
    "generate_by_interpolation",
    "generate_synthetic_data",
    "get_generator",
]
