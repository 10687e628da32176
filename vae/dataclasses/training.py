"""Define dataclasses for VAE-style generator configuration."""

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class VaeConfig:
    """Coupling coefficients of the latent-style sampler."""

    age_income_coupling: float = 0.3
    """Share of the age draw added to the income draw."""

    income_purchase_weight: float = 0.6
    age_purchase_weight: float = 0.2
    income_satisfaction_weight: float = 0.4
    seed: Optional[int] = None
