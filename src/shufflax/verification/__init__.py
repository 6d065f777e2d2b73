"""Statistical verification of shuffle uniformity.

This package provides the distribution verifier, its report type, the
statistics it relies on and biased reference shuffles for calibration.
"""

from shufflax.verification.baselines import BASELINES, comparator_sort_shuffle, naive_shuffle
from shufflax.verification.keys import canonical_key, format_key
from shufflax.verification.report import DistributionReport, merge_reports
from shufflax.verification.statistics import (
    CountSummary,
    chi_square_uniformity,
    ideal_standard_deviation,
    summarize_counts,
)
from shufflax.verification.verifier import split_trials, verify, verify_parallel


__all__ = [
    # Verifier
    "verify",
    "verify_parallel",
    "split_trials",
    # Report
    "DistributionReport",
    "merge_reports",
    # Keys
    "canonical_key",
    "format_key",
    # Statistics
    "CountSummary",
    "summarize_counts",
    "ideal_standard_deviation",
    "chi_square_uniformity",
    # Baselines
    "BASELINES",
    "naive_shuffle",
    "comparator_sort_shuffle",
]
