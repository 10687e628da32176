"""Unit tests for comparison views and the file-based report"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from typing import Final

import matplotlib

matplotlib.use("Agg")

import pandas as pd

from analytics.comparison import compare_stats, scatter_sample
from analytics.report_generator import generate_report
from analytics.statistics import compute_stats
from common.errors import EmptyInputError
from common.utilities import make_rng
from data_generation.api import generate_all
from models.enums import MethodType
from models.record import FIELDS, Record, frame_to_records


class ComparisonTests(unittest.TestCase):
    """compare_stats and scatter_sample"""

    RNG_SEED: Final = 2025

    def setUp(self) -> None:
        self.data = generate_all(300, make_rng(self.RNG_SEED))

    def test_compare_stats_table(self) -> None:
        table = compare_stats(self.data.real, self.data.vae)
        self.assertListEqual(list(table.index), list(FIELDS))
        self.assertListEqual(
            list(table.columns),
            ["real_mean", "synthetic_mean", "real_std", "synthetic_std"],
        )
        self.assertEqual(
            table.loc["age", "real_mean"], compute_stats(self.data.real)["age"].mean
        )
        self.assertEqual(
            table.loc["income", "synthetic_std"], compute_stats(self.data.vae)["income"].std
        )

    def test_compare_stats_empty_raises(self) -> None:
        with self.assertRaises(EmptyInputError):
            compare_stats(self.data.real, ())

    def test_scatter_sample_takes_first_k(self) -> None:
        sample = scatter_sample(self.data.real, self.data.gan, k=50)
        self.assertEqual(len(sample), 100)
        self.assertListEqual(list(sample.columns), list(FIELDS) + ["type"])
        self.assertEqual((sample["type"] == "real").sum(), 50)
        self.assertEqual(frame_to_records(sample.iloc[:50]), self.data.real[:50])

    def test_scatter_sample_short_sets(self) -> None:
        """k larger than a set keeps the whole set"""
        real = self.data.real[:3]
        sample = scatter_sample(real, self.data.vae[:2])
        self.assertEqual(len(sample), 5)

    def test_scatter_sample_negative_k(self) -> None:
        with self.assertRaises(ValueError):
            scatter_sample(self.data.real, self.data.vae, k=-1)


class ReportTests(unittest.TestCase):
    """generate_report writes a complete report directory."""

    RNG_SEED: Final = 11

    def test_report_files(self) -> None:
        data = generate_all(200, make_rng(self.RNG_SEED))
        with tempfile.TemporaryDirectory() as tmp:
            run_dir = Path(generate_report(data.real, data.gan, out_dir=tmp))

            self.assertTrue(run_dir.is_dir())
            synthetic = pd.read_csv(run_dir / "synthetic.csv")
            self.assertEqual(frame_to_records(synthetic), data.gan)

            summary = (run_dir / "summary.txt").read_text(encoding="utf-8")
            self.assertIn("SYNTHETIC DATA QUALITY REPORT", summary)
            self.assertIn("MAE of numeric correlations", summary)
            for field in FIELDS:
                self.assertIn(field, summary)
                self.assertTrue((run_dir / "images" / f"{field}_numeric.png").exists())
            self.assertTrue((run_dir / "images" / "num_correlation_matrix.png").exists())

    def test_report_with_constant_field(self) -> None:
        """Degenerate fields are reported instead of aborting the report"""
        real = (
            Record(age=30, income=40000, purchase_amount=60.0, satisfaction=7.0),
            Record(age=30, income=52000, purchase_amount=75.5, satisfaction=8.1),
        )
        synth = (
            Record(age=30, income=41000, purchase_amount=62.0, satisfaction=7.3),
            Record(age=30, income=50000, purchase_amount=70.0, satisfaction=7.9),
        )
        with tempfile.TemporaryDirectory() as tmp:
            run_dir = Path(generate_report(real, synth, out_dir=tmp))
            summary = (run_dir / "summary.txt").read_text(encoding="utf-8")
            self.assertIn("!! age", summary)
            self.assertIn("!! correlations undefined", summary)
            self.assertFalse((run_dir / "images" / "age_numeric.png").exists())
            self.assertTrue((run_dir / "images" / "income_numeric.png").exists())


class MainTests(unittest.TestCase):
    """The main entry point runs the whole flow."""

    def test_main_writes_report(self) -> None:
        from main import main

        with tempfile.TemporaryDirectory() as tmp:
            run_dir = Path(main(sample_size=120, method=MethodType.GAN, seed=5, out_dir=tmp))
            self.assertTrue((run_dir / "summary.txt").exists())
            self.assertEqual(len(pd.read_csv(run_dir / "synthetic.csv")), 120)


if __name__ == "__main__":
    unittest.main()
