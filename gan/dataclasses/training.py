"""Dataclasses with settings for the GAN-style interpolation generator."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(slots=True)
class NoiseConfig:
    """Full width of the uniform noise added to each field."""

    age: float = 8.0
    income: float = 15000.0
    purchase_amount: float = 20.0
    satisfaction: float = 1.5


@dataclass(slots=True)
class GanConfig:
    """Config for the interpolation generator."""

    group_size: int = 5
    """Baseline records averaged into one synthetic record."""

    noise: NoiseConfig = field(default_factory=NoiseConfig)
    seed: Optional[int] = None
