import logging
from datetime import datetime
from pathlib import Path
from typing import Sequence

import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns
from scipy.stats import ks_2samp, wasserstein_distance
from sklearn.metrics import mean_absolute_error

from analytics.comparison import compare_stats
from analytics.statistics import correlation_matrix, histogram
from common.errors import DegenerateFieldError
from models.record import FIELDS, Record, records_to_frame

LOGGER = logging.getLogger(__name__)
sns.set_theme(style="whitegrid")


def generate_report(
    real: Sequence[Record],
    synth: Sequence[Record],
    out_dir: str = "reports",
    bins: int = 20,
) -> str:
    """Write a real-vs-synthetic comparison report and return its directory.

    The directory holds ``synthetic.csv``, ``summary.txt`` and one PNG per
    field plus the correlation heatmaps under ``images/``.
    """
    ts = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    run_dir = Path(out_dir) / f"report_{ts}"
    (run_dir / "images").mkdir(parents=True, exist_ok=True)

    real_df = records_to_frame(real)
    synth_df = records_to_frame(synth)
    synth_df.to_csv(run_dir / "synthetic.csv", index=False)

    summary_lines = [
        "SYNTHETIC DATA QUALITY REPORT",
        f"Created: {datetime.now()}",
        f"Real shape: {real_df.shape}",
        f"Synthetic shape: {synth_df.shape}",
        "\n=== Column Metrics ===",
    ]

    def safe_plot(fig, filename):
        try:
            fig.tight_layout()
            fig.savefig(run_dir / "images" / filename)
        except Exception as e:
            LOGGER.warning("Failed to save %s: %s", filename, e)
        finally:
            plt.close(fig)

    def correlation_matrix_plot(corr1, corr2, filename_prefix):
        diff = (corr1 - corr2).abs()
        mae = mean_absolute_error(corr1.values.flatten(), corr2.values.flatten())

        fig, axes = plt.subplots(1, 3, figsize=(18, 5))
        for i, (mat, title) in enumerate(zip([corr1, corr2, diff], ["Real", "Synthetic", "Difference"])):
            sns.heatmap(mat, vmin=-1, vmax=1, cmap="vlag", annot=True, fmt=".3f", ax=axes[i])
            axes[i].set_title(title)
        safe_plot(fig, f"{filename_prefix}_correlation_matrix.png")
        return mae

    stats_table = compare_stats(real, synth)
    for col in FIELDS:
        r, s = real_df[col], synth_df[col]
        row = stats_table.loc[col]

        w_dist = wasserstein_distance(r, s)
        ks_stat, _ = ks_2samp(r, s)
        summary_lines.append(
            f"{col:20}| mean {row.real_mean:.2f} vs {row.synthetic_mean:.2f} "
            f"| std {row.real_std:.2f} vs {row.synthetic_std:.2f} "
            f"| W-dist {w_dist:.3f} | KS {ks_stat:.3f}"
        )

        try:
            bins_data = histogram(col, real, synth, bins)
        except DegenerateFieldError as e:
            LOGGER.warning("Skipping distribution chart for %s: %s", col, e)
            summary_lines.append(f"!! {col}: {e}")
            continue

        fig, axes = plt.subplots(1, 2, figsize=(16, 6))

        x = np.arange(len(bins_data))
        width = 0.4
        axes[0].bar(x - width / 2, [b.count_a for b in bins_data], width, label="Real", color="tab:blue")
        axes[0].bar(x + width / 2, [b.count_b for b in bins_data], width, label="Synthetic", color="tab:orange")
        axes[0].set_xticks(x)
        axes[0].set_xticklabels([b.range_start for b in bins_data], rotation=45)
        axes[0].set_title(f"Distribution Comparison: {col}", fontsize=12)
        axes[0].legend()
        axes[0].set_ylabel("Count")

        probs = np.linspace(0.01, 0.99, 100)
        qr = np.quantile(r, probs)
        qs = np.quantile(s, probs)
        axes[1].scatter(qr, qs, s=8)
        axes[1].plot([qr.min(), qr.max()], [qr.min(), qr.max()], 'k--')
        axes[1].set_title(f"QQ Plot: {col}")

        safe_plot(fig, f"{col}_numeric.png")

    try:
        corr_real = correlation_matrix(real)
        corr_synth = correlation_matrix(synth)
    except DegenerateFieldError as e:
        LOGGER.warning("Correlation matrices unavailable: %s", e)
        summary_lines.append(f"!! correlations undefined: {e}")
    else:
        mae_corr = correlation_matrix_plot(corr_real, corr_synth, "num")
        summary_lines.append("\n=== Correlations (real) ===")
        summary_lines.append(corr_real.to_string(float_format="{:.3f}".format))
        summary_lines.append("\n=== Correlations (synthetic) ===")
        summary_lines.append(corr_synth.to_string(float_format="{:.3f}".format))
        summary_lines.append(f"MAE of numeric correlations: {mae_corr:.4f}")

    with open(run_dir / "summary.txt", "w", encoding="utf-8") as f:
        f.write("\n".join(summary_lines))

    LOGGER.info("Report written to: %s", run_dir)
    return str(run_dir)
