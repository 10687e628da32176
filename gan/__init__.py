"""Module for GAN-style (interpolation-based) data generation."""

from .utilities import sample_groups, uniform_noise
from .pipeline import GAN
from .dataclasses.training import GanConfig, NoiseConfig

__all__ = [
    "GAN",
    "sample_groups",
    "uniform_noise",
    "GanConfig",
    "NoiseConfig",
]
