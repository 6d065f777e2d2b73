# ---
# jupyter:
#   jupytext:
#     formats: py:percent,ipynb
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
# ---

# %% [markdown]
"""
# Verification Quick Reference

| Metadata | Value |
|----------|-------|
| **Level** | Intermediate |
| **Runtime** | ~1 min |
| **Prerequisites** | 01_shuffle_quickref |
| **Format** | Python + Jupyter |

## Overview

A correct shuffle of three distinct items lands on each of the 6 permutations
about 16.7% of the time. This example measures that with `verify()`, runs the
trials in parallel batches, and shows the verifier catching a shuffle that
sorts with a random comparator.
"""

# %%
# Imports
import threading

from shufflax import FisherYatesShuffler, verify, verify_parallel
from shufflax.sources import PythonIndexSource
from shufflax.verification import comparator_sort_shuffle

# %% [markdown]
"""
## Step 1: Verify the Engine
"""

# %%
engine = FisherYatesShuffler(PythonIndexSource(seed=2024))
report = verify([1, 2, 3], 100_000, engine.shuffle)

print(report.to_table())
print(f"max share deviation: {report.max_share_deviation():.2f} pp")
print(f"chi-square p-value:  {report.chi_square()[1]:.3f}")

# %% [markdown]
"""
## Step 2: Parallel Batches

Each batch gets its own seeded source, so batches share no random state and
their counts merge additively.
"""

# %%
parallel_report = verify_parallel(
    [1, 2, 3],
    200_000,
    lambda batch: FisherYatesShuffler(PythonIndexSource(seed=batch)).shuffle,
    num_batches=4,
)
print(f"trials: {parallel_report.trials}, outcomes: {parallel_report.num_outcomes}")

# %% [markdown]
"""
## Step 3: Catch a Biased Shuffle

Sorting with a comparator that answers at random favours permutations the
sort reaches with fewer comparisons.
"""

# %%
biased_source = PythonIndexSource(seed=7)
biased = verify([1, 2, 3], 100_000, lambda s: comparator_sort_shuffle(s, biased_source))

print(biased.to_table())
print(
    f"std {biased.standard_deviation:.0f} vs ideal {biased.ideal_standard_deviation:.0f}"
)

# %% [markdown]
"""
## Step 4: Stop Early

A stop event (or a timeout) ends the run between trials. The partial report
is still consistent.
"""

# %%
stop = threading.Event()
timer = threading.Timer(0.05, stop.set)
timer.start()
partial = verify([1, 2, 3], 10_000_000, engine.shuffle, stop_event=stop)
timer.cancel()

print(f"completed {partial.trials} of {partial.requested_trials} trials")
print(f"complete: {partial.is_complete}")
