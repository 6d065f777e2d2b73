"""Distribution verifier for shuffle implementations.

Runs a shuffle function many times on a small fixed input, tabulates which
permutation each run produced, and summarizes how evenly the runs spread
over the observed permutations. For an unbiased shuffle of ``n`` distinct
elements every one of the ``n!`` permutations should take a ``1/n!`` share.
"""

import logging
import threading
import time
from collections import Counter
from collections.abc import Hashable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

from shufflax.core.config import validate_trial_count
from shufflax.engine.shuffler import shuffle
from shufflax.verification.keys import canonical_key
from shufflax.verification.report import DistributionReport, merge_reports

logger = logging.getLogger(__name__)

ShuffleFn = Callable[[Sequence[Any]], Sequence[Any]]
KeyFn = Callable[[Sequence[Any]], Hashable]


def verify(
    base_input: Sequence[Any],
    trials: int,
    shuffle_fn: ShuffleFn | None = None,
    *,
    key_fn: KeyFn = canonical_key,
    stop_event: threading.Event | None = None,
    timeout: float | None = None,
) -> DistributionReport:
    """Tabulate the permutations ``shuffle_fn`` produces over many trials.

    The stop event and timeout are checked before each trial, so an early
    stop always leaves a consistent partial report covering whole trials.

    Args:
        base_input: Input handed to ``shuffle_fn`` on every trial. Not modified.
        trials: Number of trials to run (at least 1).
        shuffle_fn: Shuffle under test. Defaults to ``shufflax.shuffle``.
        key_fn: Maps a shuffled sequence to its bucket key.
        stop_event: Optional event that, once set, ends the run early.
        timeout: Optional wall-clock limit in seconds.

    Returns:
        DistributionReport over the completed trials.

    Raises:
        InvalidTrialCountError: If ``trials < 1``.
    """
    trials = validate_trial_count(trials)
    if shuffle_fn is None:
        shuffle_fn = shuffle

    deadline = time.monotonic() + timeout if timeout is not None else None
    counts: Counter = Counter()
    completed = 0

    start = time.perf_counter()
    for _ in range(trials):
        if stop_event is not None and stop_event.is_set():
            break
        if deadline is not None and time.monotonic() >= deadline:
            break
        counts[key_fn(shuffle_fn(base_input))] += 1
        completed += 1
    elapsed = time.perf_counter() - start

    if completed < trials:
        logger.warning("Verification stopped early after %d of %d trials", completed, trials)

    report = DistributionReport.from_counts(counts, requested_trials=trials)
    logger.info(
        "Verified %d trials in %.3fs: %d outcomes, std=%.2f (ideal %.2f)",
        report.trials,
        elapsed,
        report.num_outcomes,
        report.standard_deviation,
        report.ideal_standard_deviation,
    )
    return report


def split_trials(trials: int, num_batches: int) -> list[int]:
    """Split ``trials`` into at most ``num_batches`` near-equal positive parts."""
    num_batches = max(1, min(num_batches, trials))
    base, extra = divmod(trials, num_batches)
    return [base + (1 if i < extra else 0) for i in range(num_batches)]


def verify_parallel(
    base_input: Sequence[Any],
    trials: int,
    shuffle_fn_factory: Callable[[int], ShuffleFn],
    *,
    num_batches: int = 4,
    max_workers: int | None = None,
    key_fn: KeyFn = canonical_key,
    stop_event: threading.Event | None = None,
    timeout: float | None = None,
) -> DistributionReport:
    """Run ``verify`` over independent trial batches and merge the results.

    Each batch gets its own shuffle function from ``shuffle_fn_factory``
    (called with the batch index), so batches share no random state. Give
    each batch a differently seeded index source to keep them independent.

    Args:
        base_input: Input handed to every shuffle. Not modified.
        trials: Total number of trials across all batches (at least 1).
        shuffle_fn_factory: Builds the shuffle function for a batch index.
        num_batches: Number of batches to split the trials into.
        max_workers: Thread pool size. Defaults to ``num_batches``.
        key_fn: Maps a shuffled sequence to its bucket key.
        stop_event: Optional event that ends every batch early once set.
        timeout: Optional wall-clock limit in seconds, applied per batch.

    Returns:
        Merged DistributionReport.

    Raises:
        InvalidTrialCountError: If ``trials < 1``.
        ValueError: If ``num_batches < 1``.
    """
    trials = validate_trial_count(trials)
    if num_batches < 1:
        raise ValueError(f"num_batches must be positive, got {num_batches}")

    batches = split_trials(trials, num_batches)
    shuffle_fns = [shuffle_fn_factory(i) for i in range(len(batches))]

    def run_batch(index: int) -> DistributionReport:
        logger.debug("Starting batch %d with %d trials", index, batches[index])
        return verify(
            base_input,
            batches[index],
            shuffle_fns[index],
            key_fn=key_fn,
            stop_event=stop_event,
            timeout=timeout,
        )

    with ThreadPoolExecutor(max_workers=max_workers or len(batches)) as executor:
        reports = list(executor.map(run_batch, range(len(batches))))

    return merge_reports(*reports)
