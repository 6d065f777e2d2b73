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
# Shuffle Quick Reference

| Metadata | Value |
|----------|-------|
| **Level** | Beginner |
| **Runtime** | ~1 min |
| **Prerequisites** | Basic Python |
| **Format** | Python + Jupyter |

## Overview

This quick reference shuffles a small deck with Shufflax, replays a shuffle
exactly with a scripted index source, and steps through a shuffle one swap at
a time the way a visualizer would.

## Learning Goals

By the end of this example, you will be able to:

1. Shuffle any sequence without touching the original
2. Swap the randomness backend (Python, NumPy, JAX)
3. Reproduce a shuffle exactly from scripted draws
4. Pace a shuffle step by step with `steps()`
"""

# %% [markdown]
"""
## Setup

```bash
uv pip install shufflax
```
"""

# %%
# Imports
import time

import numpy as np

from shufflax import FisherYatesShuffler, shuffle
from shufflax.sources import JaxIndexSource, NumpyIndexSource, ScriptedIndexSource

# %% [markdown]
"""
## Step 1: Shuffle a Deck

`shuffle()` returns a new sequence of the same container type. The input is
left exactly as it was, including any nested elements.
"""

# %%
deck = ["A", "B", "C", "D", "E", "F"]
shuffled = shuffle(deck)

print(f"original: {deck}")
print(f"shuffled: {shuffled}")
# Expected output (order varies):
# original: ['A', 'B', 'C', 'D', 'E', 'F']
# shuffled: ['D', 'A', 'F', 'C', 'E', 'B']

# %% [markdown]
"""
## Step 2: Choose a Backend

Every index source takes an optional seed. Seeded sources replay the same
draws, so the same seed gives the same shuffle.
"""

# %%
numpy_shuffler = FisherYatesShuffler(NumpyIndexSource(seed=0))
jax_shuffler = FisherYatesShuffler(JaxIndexSource(seed=0))

print(f"numpy: {numpy_shuffler.shuffle(deck)}")
print(f"jax:   {jax_shuffler.shuffle(deck)}")

rows = np.arange(8).reshape(4, 2)
print(f"array rows:\n{numpy_shuffler.shuffle(rows)}")

# %% [markdown]
"""
## Step 3: Replay Scripted Draws

A scripted source answers each `next(bound)` call from a fixed list, which
pins down the output exactly.
"""

# %%
scripted = ScriptedIndexSource([1, 0, 1])
print(shuffle(["A", "B", "C", "D"], scripted))
print(f"bounds requested: {scripted.bounds}")
# Expected output:
# ['C', 'D', 'A', 'B']
# bounds requested: [4, 3, 2]

# %% [markdown]
"""
## Step 4: Step Through a Shuffle

`steps()` yields control after every swap. Pacing belongs to the caller; the
draws and the result are the same as for `shuffle()`.
"""

# %%
stepwise = FisherYatesShuffler(ScriptedIndexSource([1, 0, 1])).steps(["A", "B", "C", "D"])
for event in stepwise:
    print(f"{event.describe():<24} {' '.join(event.state_after)}")
    time.sleep(0.2)

print(f"result: {stepwise.result}")
# Expected output:
# i=3: swap with j=1       A D C B
# i=2: swap with j=0       C D A B
# i=1: no swap needed      C D A B
# result: ['C', 'D', 'A', 'B']
