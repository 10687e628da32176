"""Gan-style generator unit-tests"""

from __future__ import annotations

import unittest
from typing import Final

import numpy as np

from analytics.statistics import compute_stats
from common.errors import EmptyInputError
from common.utilities import make_rng
from data_generation.baseline import generate_baseline
from gan.dataclasses.training import GanConfig, NoiseConfig
from gan.pipeline import GAN
from gan.utilities import sample_groups, uniform_noise
from models.record import Record

# --------------------------------------------------------------------------- #
#                                         Test-suite                         #
# --------------------------------------------------------------------------- #


class GANTests(unittest.TestCase):
    """Unit-tests for utilities, configuration and the interpolation pipeline."""

    RNG_SEED: Final = 2025

    def setUp(self) -> None:
        self.baseline = generate_baseline(1000, make_rng(self.RNG_SEED))

    def test_sample_groups_shape_and_range(self) -> None:
        """Group indices address the baseline and have one row per output"""
        idx = sample_groups(make_rng(self.RNG_SEED), 10, 100, 5)
        self.assertEqual(idx.shape, (100, 5))
        self.assertGreaterEqual(idx.min(), 0)
        self.assertLess(idx.max(), 10)

    def test_uniform_noise_width(self) -> None:
        """Noise is centered and bounded by half the amplitude"""
        noise = uniform_noise(make_rng(self.RNG_SEED), 2000, 8.0)
        self.assertGreaterEqual(noise.min(), -4.0)
        self.assertLess(noise.max(), 4.0)
        self.assertLess(abs(noise.mean()), 0.5)

    def test_default_config(self) -> None:
        cfg = GanConfig()
        self.assertEqual(cfg.group_size, 5)
        self.assertEqual(
            (cfg.noise.age, cfg.noise.income, cfg.noise.purchase_amount, cfg.noise.satisfaction),
            (8.0, 15000.0, 20.0, 1.5),
        )

    def test_generate_length_and_bounds(self) -> None:
        records = GAN(rng=make_rng(1)).generate(self.baseline, 800)
        self.assertEqual(len(records), 800)
        for r in records:
            self.assertTrue(18 <= r.age <= 80)
            self.assertGreaterEqual(r.income, 20000)
            self.assertGreaterEqual(r.purchase_amount, 0)
            self.assertTrue(1 <= r.satisfaction <= 10)

    def test_generate_is_reproducible_with_seed(self) -> None:
        first = GAN(GanConfig(seed=4)).generate(self.baseline, 40)
        second = GAN(GanConfig(seed=4)).generate(self.baseline, 40)
        self.assertEqual(first, second)

    def test_interpolation_shrinks_spread(self) -> None:
        """Averaging groups keeps the mean but narrows the income spread"""
        real = compute_stats(self.baseline)["income"]
        synth = compute_stats(GAN(rng=make_rng(2)).generate(self.baseline, 1000))["income"]
        self.assertLess(abs(synth.mean - real.mean) / real.mean, 0.1)
        self.assertLess(synth.std, real.std)

    def test_noise_free_single_record(self) -> None:
        """Without noise a one-record baseline is reproduced exactly"""
        record = Record(age=40, income=50000, purchase_amount=100.0, satisfaction=8.0)
        cfg = GanConfig(noise=NoiseConfig(0.0, 0.0, 0.0, 0.0))
        records = GAN(cfg, rng=make_rng(0)).generate((record,), 3)
        self.assertEqual(records, (record,) * 3)

    def test_output_values_are_rounded(self) -> None:
        """Decimal fields carry one decimal place"""
        records = GAN(rng=make_rng(9)).generate(self.baseline, 100)
        amounts = np.array([r.purchase_amount for r in records])
        np.testing.assert_allclose(amounts * 10, np.round(amounts * 10), atol=1e-6)

    def test_invalid_group_size(self) -> None:
        with self.assertRaises(ValueError):
            GAN(GanConfig(group_size=0))

    def test_negative_count_raises(self) -> None:
        with self.assertRaises(ValueError):
            GAN(rng=make_rng(0)).generate(self.baseline, -5)

    def test_empty_baseline_raises(self) -> None:
        with self.assertRaises(EmptyInputError):
            GAN(rng=make_rng(0)).generate((), 10)


if __name__ == "__main__":
    unittest.main()
