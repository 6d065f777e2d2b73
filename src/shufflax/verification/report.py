"""Distribution report produced by a verification run."""

from collections import Counter
from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from shufflax.verification.keys import format_key
from shufflax.verification.statistics import (
    chi_square_uniformity,
    ideal_standard_deviation,
    summarize_counts,
)


@dataclass(frozen=True)
class DistributionReport:
    """Tabulated shuffle outcomes and their spread.

    Build instances with ``from_counts``; the counts mapping is read-only.

    Attributes:
        counts: Occurrences of each canonical permutation key.
        trials: Number of completed trials (sum of counts).
        requested_trials: Number of trials asked for. Larger than ``trials``
            when the run was stopped early.
        mean: ``trials / number of distinct keys observed``.
        variance: Population variance of the counts.
        standard_deviation: Population standard deviation of the counts.
        ideal_standard_deviation: Expected standard deviation of the counts
            under a uniform multinomial over the observed keys.
    """

    counts: Mapping[Hashable, int]
    trials: int
    requested_trials: int
    mean: float
    variance: float
    standard_deviation: float
    ideal_standard_deviation: float

    @classmethod
    def from_counts(
        cls, counts: Mapping[Hashable, int], requested_trials: int | None = None
    ) -> "DistributionReport":
        """Compute statistics for a counts mapping.

        Args:
            counts: Occurrences per canonical key. Copied, not referenced.
            requested_trials: Trials asked for; defaults to the completed count.

        Returns:
            A new DistributionReport.
        """
        frozen = MappingProxyType(dict(counts))
        trials = sum(frozen.values())
        summary = summarize_counts(list(frozen.values()))
        return cls(
            counts=frozen,
            trials=trials,
            requested_trials=trials if requested_trials is None else requested_trials,
            mean=summary.mean,
            variance=summary.variance,
            standard_deviation=summary.std,
            ideal_standard_deviation=ideal_standard_deviation(trials, len(frozen)),
        )

    @property
    def num_outcomes(self) -> int:
        """Number of distinct permutations observed."""
        return len(self.counts)

    @property
    def is_complete(self) -> bool:
        """True when every requested trial ran."""
        return self.trials >= self.requested_trials

    def percentages(self) -> dict[Hashable, float]:
        """Share of trials per permutation, in percent."""
        if self.trials == 0:
            return {}
        return {key: 100.0 * count / self.trials for key, count in self.counts.items()}

    def max_share_deviation(self) -> float:
        """Largest gap between an observed share and the uniform share.

        Returns:
            Absolute deviation in percentage points (0.0 for an empty report).
        """
        if self.num_outcomes == 0:
            return 0.0
        uniform = 100.0 / self.num_outcomes
        return max(abs(share - uniform) for share in self.percentages().values())

    def chi_square(self) -> tuple[float, float]:
        """Chi-square statistic and p-value against a uniform distribution."""
        return chi_square_uniformity(list(self.counts.values()))

    def merge(self, other: "DistributionReport") -> "DistributionReport":
        """Additive union of two reports, with statistics recomputed."""
        merged = Counter(self.counts)
        merged.update(other.counts)
        return DistributionReport.from_counts(
            merged, requested_trials=self.requested_trials + other.requested_trials
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict (keys rendered as strings)."""
        return {
            "counts": {format_key(key): count for key, count in self.counts.items()},
            "trials": self.trials,
            "requested_trials": self.requested_trials,
            "mean": self.mean,
            "variance": self.variance,
            "standard_deviation": self.standard_deviation,
            "ideal_standard_deviation": self.ideal_standard_deviation,
        }

    def to_table(self) -> str:
        """Human-readable table of permutation, count and percentage."""
        rows = [(format_key(key), count) for key, count in _sorted_items(self.counts)]
        width = max([len("Permutation")] + [len(label) for label, _ in rows])
        count_width = max([len("Count")] + [len(str(count)) for _, count in rows])

        lines = [f"{'Permutation':<{width}}  {'Count':>{count_width}}  {'Percentage':>10}"]
        lines.append("-" * len(lines[0]))
        for label, count in rows:
            pct = 100.0 * count / self.trials if self.trials else 0.0
            lines.append(f"{label:<{width}}  {count:>{count_width}}  {pct:>9.2f}%")

        lines.append("")
        lines.append(f"trials: {self.trials}/{self.requested_trials}")
        lines.append(f"mean: {self.mean:.2f}")
        lines.append(f"standard deviation: {self.standard_deviation:.2f}")
        lines.append(f"ideal standard deviation: {self.ideal_standard_deviation:.2f}")
        return "\n".join(lines)


def _sorted_items(counts: Mapping[Hashable, int]) -> list[tuple[Hashable, int]]:
    try:
        return sorted(counts.items())
    except TypeError:
        # Keys of mixed element types are not mutually orderable
        return sorted(counts.items(), key=lambda item: format_key(item[0]))


def merge_reports(*reports: DistributionReport) -> DistributionReport:
    """Merge any number of reports (e.g. from parallel trial batches).

    Returns:
        A report over the summed counts; an empty report when given none.
    """
    merged: Counter = Counter()
    requested = 0
    for report in reports:
        merged.update(report.counts)
        requested += report.requested_trials
    return DistributionReport.from_counts(merged, requested_trials=requested)
