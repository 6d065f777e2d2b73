"""Statistical analysis of permutation counts.

Counts of how often each permutation occurred are compared against the
multinomial distribution a perfectly uniform shuffle would produce.
"""

import math
from dataclasses import dataclass
from collections.abc import Sequence

import numpy as np
from scipy import stats as scipy_stats


@dataclass(frozen=True)
class CountSummary:
    """Spread of outcome counts.

    Attributes:
        mean: Trials per observed outcome.
        variance: Population variance (ddof=0) of the counts.
        std: Population standard deviation of the counts.
    """

    mean: float
    variance: float
    std: float


def summarize_counts(counts: Sequence[int]) -> CountSummary:
    """Mean, variance and standard deviation of outcome counts.

    Population statistics are used: the counts always sum to the number of
    trials, so their mean is fixed and ddof=0 gives an unbiased estimate of
    the per-outcome variance.

    Args:
        counts: Occurrence count of each observed outcome.

    Returns:
        CountSummary; all zeros when ``counts`` is empty.
    """
    if len(counts) == 0:
        return CountSummary(mean=0.0, variance=0.0, std=0.0)

    arr = np.asarray(counts, dtype=np.float64)
    variance = float(np.var(arr))
    return CountSummary(mean=float(np.mean(arr)), variance=variance, std=math.sqrt(variance))


def ideal_standard_deviation(trials: int, num_outcomes: int) -> float:
    """Expected standard deviation of counts under a uniform multinomial.

    Each of ``k`` outcomes has probability ``p = 1/k``; a single outcome's
    count over ``N`` trials has variance ``N * p * (1 - p)``.

    This is not ``sqrt(N * (1 - 1/k))``, a formula sometimes quoted for the
    same quantity: that omits the factor ``p`` and overstates the spread by
    ``sqrt(k)``. For 3 items (k = 6) and one million trials the value here is
    about 372.7, where the other formula gives about 912.9.

    Args:
        trials: Number of trials N.
        num_outcomes: Number of equally likely outcomes k.

    Returns:
        ``sqrt(N * (1/k) * (1 - 1/k))``, or 0.0 when there are no outcomes.
    """
    if num_outcomes <= 0 or trials <= 0:
        return 0.0
    p = 1.0 / num_outcomes
    return math.sqrt(trials * p * (1.0 - p))


def chi_square_uniformity(counts: Sequence[int]) -> tuple[float, float]:
    """Pearson chi-square test of the counts against a uniform distribution.

    Args:
        counts: Occurrence count of each outcome.

    Returns:
        Tuple of (chi_square_statistic, p_value). A single outcome (or none)
        carries no evidence either way and returns (0.0, 1.0).
    """
    if len(counts) < 2:
        return (0.0, 1.0)
    result = scipy_stats.chisquare(np.asarray(counts, dtype=np.float64))
    return (float(result.statistic), float(result.pvalue))
