# data_generation/api.py
"""Entry points for generating baseline and synthetic record sets."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Protocol, Sequence, Type

import numpy as np

from common.utilities import make_rng
from data_generation.baseline import DEFAULT_SIZE, generate_baseline
from gan.pipeline import GAN
from models.enums import MethodType
from models.record import Record, RecordSet
from vae.pipeline import VAE

LOGGER = logging.getLogger(__name__)


class SyntheticGenerator(Protocol):
    """Anything able to turn a baseline record set into a synthetic one."""

    def generate(self, baseline: Sequence[Record], n: int) -> RecordSet:
        ...


GENERATORS: Dict[MethodType, Type[SyntheticGenerator]] = {
    MethodType.VAE: VAE,
    MethodType.GAN: GAN,
}


def get_generator(
    method_type: MethodType, rng: Optional[np.random.Generator] = None
) -> SyntheticGenerator:
    """Build the generator registered for ``method_type`` with default settings."""
    try:
        generator_cls = GENERATORS[MethodType(method_type)]
    except (KeyError, ValueError) as exc:
        raise ValueError(f"unsupported generation method: {method_type!r}") from exc
    return generator_cls(rng=rng)


def generate_by_distribution(
    baseline: Sequence[Record], n: int, rng: Optional[np.random.Generator] = None
) -> RecordSet:
    """Distribution-based synthetic records (see ``vae.pipeline.VAE``)."""
    return VAE(rng=rng).generate(baseline, n)


def generate_by_interpolation(
    baseline: Sequence[Record], n: int, rng: Optional[np.random.Generator] = None
) -> RecordSet:
    """Interpolation-based synthetic records (see ``gan.pipeline.GAN``)."""
    return GAN(rng=rng).generate(baseline, n)


def generate_synthetic_data(
    baseline: Sequence[Record],
    method_type: MethodType,
    synthetic_size: int,
    rng: Optional[np.random.Generator] = None,
) -> RecordSet:
    """Generate ``synthetic_size`` records with the selected method."""
    LOGGER.info("Using %s method for synthetic data generation", MethodType(method_type).name)
    return get_generator(method_type, rng).generate(baseline, synthetic_size)


@dataclass(frozen=True)
class GeneratedData:
    """One regeneration: the baseline and a synthetic set per method."""

    real: RecordSet
    vae: RecordSet
    gan: RecordSet

    def synthetic(self, method_type: MethodType) -> RecordSet:
        """Synthetic set produced by ``method_type``."""
        if MethodType(method_type) is MethodType.VAE:
            return self.vae
        return self.gan


def generate_all(
    n: int = DEFAULT_SIZE, rng: Optional[np.random.Generator] = None
) -> GeneratedData:
    """Sample a fresh baseline and derive both synthetic sets of the same size."""
    rng = rng if rng is not None else make_rng()
    real = generate_baseline(n, rng)
    return GeneratedData(
        real=real,
        vae=generate_synthetic_data(real, MethodType.VAE, n, rng),
        gan=generate_synthetic_data(real, MethodType.GAN, n, rng),
    )
