"""
analytics package: statistics and comparison views over record sets plus
the file-based real-vs-synthetic report.
"""

from .statistics import compute_stats, correlation, correlation_matrix, histogram
from .comparison import compare_stats, scatter_sample

__all__ = [
    "compute_stats",
    "correlation",
    "correlation_matrix",
    "histogram",
    "compare_stats",
    "scatter_sample",
]
