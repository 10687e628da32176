"""Module for VAE-style (distribution-based) data generation."""

from .utilities import draw_latents
from .pipeline import VAE
from .dataclasses.training import VaeConfig

__all__ = [
    "draw_latents",
    "VAE",
    "VaeConfig",
]
